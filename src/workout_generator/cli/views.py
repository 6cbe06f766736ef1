"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of generated workouts.
"""

from rich.console import Console
from rich.table import Table

from ..core.models import CandidateExercise, GeneratedPlan

console = Console()
err_console = Console(stderr=True)


def format_plan_table(plan: GeneratedPlan) -> Table:
    """
    Create a Rich table for a generated workout.

    Args:
        plan: Plan to display

    Returns:
        Rich Table object
    """
    table = Table(title=plan.title)

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Exercise", style="cyan")
    table.add_column("Notes")

    for ex in plan.exercises:
        table.add_row(str(ex.order_index + 1), ex.name, ex.notes or "")

    return table


def print_plan(plan: GeneratedPlan) -> None:
    """
    Print a generated workout to console.

    An empty plan prints its explanatory note as a warning instead of a table.
    """
    console.print()
    if not plan.exercises:
        console.print(f"[bold]{plan.title}[/bold]")
        print_warning(plan.notes or "No exercises selected.")
        return

    console.print(format_plan_table(plan))
    console.print(
        f"[dim]{plan.estimated_duration_minutes} min · {plan.goal} · {plan.location}[/dim]"
    )
    if plan.notes:
        console.print()
        console.print(plan.notes)
    console.print()


def format_pool_table(pool: list[CandidateExercise]) -> Table:
    """
    Create a Rich table of the ranked candidate pool.

    Args:
        pool: Ranked candidates

    Returns:
        Rich Table object
    """
    table = Table(title="Candidate Pool")

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Exercise", style="cyan")
    table.add_column("Muscle", style="green")
    table.add_column("Equipment")
    table.add_column("Level", style="magenta")
    table.add_column("Class")
    table.add_column("Pop.", justify="right", style="bold")

    for i, c in enumerate(pool, 1):
        table.add_row(
            str(i),
            c.name,
            c.primary_muscle or "-",
            c.equipment or "bodyweight",
            c.level or "?",
            c.compound.value,
            f"{c.popularity_score:g}",
        )

    return table


def print_pool(pool: list[CandidateExercise]) -> None:
    """Print the candidate pool, or a notice when it is empty."""
    if not pool:
        console.print("[yellow]No candidates pass the current filters.[/yellow]")
        return
    console.print(format_pool_table(pool))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")
