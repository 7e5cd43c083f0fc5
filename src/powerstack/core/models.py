"""
Data models for powerstack.

Plate catalogs, barbell loads, score inputs, formula coefficients and the
lift records handed over by the results lookup.  Calculation inputs are
plain values; only records supplied from outside validate themselves.
"""

from dataclasses import dataclass, field
from typing import Literal

Unit = Literal["kg", "lb"]
Gender = Literal["male", "female"]
Equipment = Literal["raw", "equipped"]
Category = Literal["full", "bench"]  # full meet (3-lift) or bench-only
Formula = Literal["dots", "wilks", "wilks2", "ipf", "ipf_gl"]
ProgressMode = Literal["percentage", "total", "hide"]

# label -> count, heaviest plate first, zero counts omitted
Distribution = dict[str, int]


@dataclass(frozen=True)
class Plate:
    """A single plate denomination."""

    weight: float  # In the unit of the owning PlateSet
    label: str  # Colour for metric plates, denomination for pound plates


@dataclass(frozen=True)
class PlateSet:
    """
    A plate catalog together with the bar it is loaded on.

    Plates are ordered heaviest first; the solver relies on that order and
    never re-sorts.
    """

    name: str  # "metric" | "pound"
    unit: Unit
    bar_weight: float
    plates: tuple[Plate, ...]

    def plate_weight(self, label: str) -> float:
        """Return the weight of the plate with the given label (0 if unknown)."""
        for plate in self.plates:
            if plate.label == label:
                return plate.weight
        return 0.0


@dataclass
class BarbellLoad:
    """
    Result of loading a barbell for a target weight.

    The distribution lists plates for ONE side of the bar.
    """

    plate_set: PlateSet
    distribution: Distribution = field(default_factory=dict)

    @property
    def unit(self) -> Unit:
        return self.plate_set.unit

    @property
    def bar_weight(self) -> float:
        return self.plate_set.bar_weight

    @property
    def plate_count(self) -> int:
        """Number of plates on one side."""
        return sum(self.distribution.values())

    @property
    def is_empty(self) -> bool:
        return not self.distribution


@dataclass(frozen=True)
class ScoreInput:
    """
    Inputs for the scoring formulas.

    ``total`` and ``bodyweight`` are accepted as typed (str) or numeric, in
    ``unit``.  They are parsed by the engine; nothing is validated here.
    Equipment and category only matter for IPF and IPF GL points.
    """

    total: float | str | None
    bodyweight: float | str | None
    gender: Gender = "male"
    equipment: Equipment = "raw"
    category: Category = "full"
    unit: Unit = "kg"


@dataclass(frozen=True)
class PolynomialParams:
    """Coefficients for DOTS and both Wilks variants."""

    coefficients: tuple[float, ...]  # c0 .. cn, denominator = sum(ci * bw**i)
    bw_min: float  # Valid bodyweight range; inputs are clamped into it
    bw_max: float
    numerator: float  # 500 for DOTS / Wilks, 600 for Wilks2


@dataclass(frozen=True)
class IPFParams:
    """IPF points coefficients: linear in ln(bodyweight)."""

    coefficients: tuple[float, float, float, float]


@dataclass(frozen=True)
class IPFGLParams:
    """IPF GL points coefficients: exponential decay in bodyweight."""

    coefficients: tuple[float, float, float]


@dataclass(frozen=True)
class LiftRecord:
    """
    Best (or first) results of a lifter, weights in kg.

    ``dots`` is a score and never unit-converted.
    """

    squat: float = 0.0
    bench: float = 0.0
    deadlift: float = 0.0
    total: float = 0.0
    dots: float = 0.0

    def __post_init__(self) -> None:
        """Validate lift values."""
        for name in ("squat", "bench", "deadlift", "total", "dots"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class MeetResult:
    """One competition entry of a lifter, as supplied by the results lookup."""

    date: str  # ISO format: YYYY-MM-DD
    squat: float = 0.0
    bench: float = 0.0
    deadlift: float = 0.0
    total: float = 0.0
    dots: float = 0.0
    meet_name: str = ""

    def __post_init__(self) -> None:
        """Validate meet data."""
        self._validate_date(self.date)
        for name in ("squat", "bench", "deadlift", "total", "dots"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @staticmethod
    def _validate_date(date_str: str) -> None:
        """Validate date string is ISO format YYYY-MM-DD."""
        import re

        if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
            raise ValueError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

        from datetime import datetime

        try:
            datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError as e:
            raise ValueError(f"Invalid date: {date_str}") from e

    def to_record(self) -> LiftRecord:
        """Drop the meet metadata, keeping the lift values."""
        return LiftRecord(
            squat=self.squat,
            bench=self.bench,
            deadlift=self.deadlift,
            total=self.total,
            dots=self.dots,
        )
