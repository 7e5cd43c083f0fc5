"""
CLI entry point using Typer.

Provides the powerlifting calculators:
- plates: Plate loading for a target barbell weight
- score: DOTS, Wilks, Wilks2, IPF and IPF GL points
- 1rm: One-rep max estimate
- attempts: Meet attempt selection
- progress: First meet vs personal bests
- settings: Show effective settings
"""

import typer

from . import views
from .app import app

# Importing the command modules registers their commands on the app
from .commands import plates as _plates  # noqa: F401
from .commands import scores as _scores  # noqa: F401
from .commands import tools as _tools  # noqa: F401


def _prompt_float(label: str) -> float | None:
    """Ask for a number; None if the answer is empty or not a number."""
    raw = views.console.input(f"{label}: ").strip()
    try:
        return float(raw)
    except ValueError:
        return None


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Powerlifting calculators. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return

    # ── Interactive main menu ───────────────────────────────────────────────
    views.console.print()
    views.console.print("[bold cyan]powerstack[/bold cyan] — powerlifting calculators")
    views.console.print()

    menu = {
        "1": ("plates",   "Plate calculator"),
        "2": ("score",    "Score calculator"),
        "3": ("1rm",      "One-rep max"),
        "4": ("attempts", "Attempt selection"),
        "5": ("progress", "Progress since first meet"),
        "s": ("settings", "Show settings"),
        "0": ("quit",     "Quit"),
    }

    for key, (_, desc) in menu.items():
        views.console.print(f"  \\[{key}] {desc}")

    views.console.print()
    choice = views.console.input("Choose [1]: ").strip() or "1"

    if choice == "0":
        raise typer.Exit(0)

    chosen = {k: v[0] for k, v in menu.items()}.get(choice)
    if chosen is None:
        views.print_error(f"Unknown choice: {choice}")
        raise typer.Exit(1)

    if chosen == "settings":
        ctx.invoke(_tools.show_settings)
        return

    if chosen == "progress":
        total = views.console.input("Total, first:best in kg: ").strip()
        ctx.invoke(_tools.progress, total=total or None)
        return

    if chosen == "score":
        total = views.console.input("Total: ").strip()
        bodyweight = views.console.input("Bodyweight: ").strip()
        ctx.invoke(_scores.score, total=total, bodyweight=bodyweight)
        return

    first_label = {"plates": "Weight", "1rm": "Weight", "attempts": "Estimated 3rd attempt (lbs)"}[chosen]
    value = _prompt_float(first_label)
    if value is None:
        views.print_error("Enter a number")
        raise typer.Exit(1)

    if chosen == "plates":
        ctx.invoke(_plates.plates, weight=value)
    elif chosen == "1rm":
        reps = _prompt_float("Reps")
        if reps is None:
            views.print_error("Enter a number")
            raise typer.Exit(1)
        ctx.invoke(_tools.onerepmax, weight=value, reps=reps)
    elif chosen == "attempts":
        ctx.invoke(_tools.attempts, third_attempt=value)


if __name__ == "__main__":
    app()
