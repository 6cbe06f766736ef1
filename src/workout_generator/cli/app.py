"""Shared Typer app object, shared option types, and provider/request utilities."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from ..core.config_loader import load_settings
from ..core.models import GenerationRequest
from ..io.catalog_store import FileCatalogProvider, get_bundled_catalog_path
from . import views

# Shared request options used by generate / explain / pool
LevelOption = Annotated[
    str,
    typer.Option("--level", "-l", help="Training level: beginner, intermediate, advanced"),
]
GoalOption = Annotated[
    str,
    typer.Option(
        "--goal", "-g",
        help="Goal: build_muscle, lose_fat, get_stronger, improve_endurance",
    ),
]
LocationOption = Annotated[
    str,
    typer.Option("--location", help="Where you train: home, gym, both"),
]
MinutesOption = Annotated[
    int,
    typer.Option("--minutes", "-m", help="Session length in minutes (30 / 45 / 60)"),
]
FocusOption = Annotated[
    Optional[list[str]],
    typer.Option("--focus", "-f", help="Focus area (repeatable): chest, back, legs, ..."),
]
EquipmentOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--equipment", "-q",
        help="Home equipment (repeatable): bodyweight, dumbbells, kettlebell, ...",
    ),
]
CardioOption = Annotated[
    Optional[list[str]],
    typer.Option("--cardio", help="Cardio preference (repeatable): running, cycling, ..."),
]
CatalogOption = Annotated[
    Optional[Path],
    typer.Option("--catalog", "-c", help="Path to a YAML/JSON exercise catalog"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="workout-generator",
    help="Rule-based workout generator: picks and orders exercises for your goal.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info-level log messages"),
    ] = False,
) -> None:
    """
    Generate workouts from an exercise catalog.
    """
    configure_logging(verbose)


def configure_logging(verbose: bool = False) -> None:
    """Route package log records through Rich on stderr."""
    pkg_logger = logging.getLogger("workout_generator")
    pkg_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=views.err_console, show_time=False, show_path=False)
        )


def get_provider(catalog_path: Path | None) -> FileCatalogProvider:
    """Catalog from --catalog, then the settings file, then the bundled sample."""
    settings = load_settings()
    if catalog_path is None and settings["catalog_path"]:
        catalog_path = Path(settings["catalog_path"]).expanduser()
    if catalog_path is None:
        catalog_path = get_bundled_catalog_path()
    return FileCatalogProvider(catalog_path, limit=settings["catalog_limit"])


def build_request(
    level: str,
    goal: str,
    location: str,
    minutes: int,
    focus: list[str] | None,
    equipment: list[str] | None,
    cardio: list[str] | None,
) -> GenerationRequest:
    """Build a GenerationRequest from CLI values; exits with code 1 on invalid input."""
    try:
        return GenerationRequest(
            level=level.strip().lower(),  # type: ignore[arg-type]
            goal=goal.strip().lower(),  # type: ignore[arg-type]
            location=location.strip().lower(),  # type: ignore[arg-type]
            session_length_minutes=minutes,
            focus_areas=tuple(f.strip().lower() for f in focus or []),  # type: ignore[arg-type]
            home_equipment=tuple(e.strip().lower() for e in equipment or []),  # type: ignore[arg-type]
            cardio_preferences=tuple(c.strip().lower() for c in cardio or []),  # type: ignore[arg-type]
        )
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
