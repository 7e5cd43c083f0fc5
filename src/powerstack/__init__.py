"""
powerstack: powerlifting calculators.

Plate loading, strength scores (DOTS, Wilks, Wilks2, IPF, IPF GL),
one-rep max estimation, attempt selection and progress tracking.
"""

__version__ = "0.3.0"
