"""CLI entrypoint for track-geo."""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.table import Table

from track_geo.geo import calculate_bearing, calculate_distance
from track_geo.models import GeoPoint
from track_geo.smoothing import STANDSTILL_SPEED, dynamic_smoothing, smoothing_weight

console = Console()
logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("TRACK_GEO_LOG_LEVEL", "WARNING")

# Lets "-33.86" through as a value instead of an unknown option
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _points(lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[GeoPoint, GeoPoint]:
    p1, p2 = GeoPoint(lat1, lon1), GeoPoint(lat2, lon2)
    for label, point in (("start", p1), ("end", p2)):
        errors = point.validate()
        if errors:
            logger.warning("%s point: %s", label, "; ".join(errors))
    return p1, p2


def _coord_args(f):
    for name in reversed(("lat1", "lon1", "lat2", "lon2")):
        f = click.argument(name, type=float)(f)
    return f


@click.group()
@click.option(
    "--log-level",
    default=LOG_LEVEL,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level. TRACK_GEO_LOG_LEVEL sets the default and must be one of these names.",
)
def cli(log_level: str):
    """Track Geo — distance, bearing and speed smoothing for GPS fixes."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command(context_settings=NUMERIC_ARGS)
@_coord_args
def distance(lat1: float, lon1: float, lat2: float, lon2: float):
    """Great-circle distance between two points."""
    p1, p2 = _points(lat1, lon1, lat2, lon2)
    meters = calculate_distance(p1, p2)
    logger.debug("distance %s -> %s = %r m", p1, p2, meters)
    console.print(f"[bold]{meters:.1f}[/] m ({meters / 1000:.3f} km)")


@cli.command(context_settings=NUMERIC_ARGS)
@_coord_args
def bearing(lat1: float, lon1: float, lat2: float, lon2: float):
    """Initial compass bearing from the first point to the second."""
    p1, p2 = _points(lat1, lon1, lat2, lon2)
    degrees = calculate_bearing(p1, p2)
    logger.debug("bearing %s -> %s = %r deg", p1, p2, degrees)
    console.print(f"[bold]{degrees:.2f}[/]°")


@cli.command(context_settings=NUMERIC_ARGS)
@_coord_args
def leg(lat1: float, lon1: float, lat2: float, lon2: float):
    """Distance plus forward and reverse bearings for one leg."""
    p1, p2 = _points(lat1, lon1, lat2, lon2)

    table = Table(title=f"Leg ({lat1:.5f}, {lon1:.5f}) → ({lat2:.5f}, {lon2:.5f})")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Distance (m)", f"{calculate_distance(p1, p2):.1f}")
    table.add_row("Bearing (°)", f"{calculate_bearing(p1, p2):.2f}")
    table.add_row("Reverse bearing (°)", f"{calculate_bearing(p2, p1):.2f}")

    console.print(table)


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("last_speed", type=float)
@click.argument("current_speed", type=float)
@click.option("--direction-change", default=0.0, help="Heading change since last fix (degrees).")
@click.option("--accuracy", default=0.0, help="Location accuracy radius (meters).")
def smooth(last_speed: float, current_speed: float, direction_change: float, accuracy: float):
    """Blend a new speed reading into the previous smoothed speed."""
    weight = smoothing_weight(direction_change, accuracy)
    result = dynamic_smoothing(last_speed, current_speed, direction_change, accuracy)
    logger.debug(
        "smooth last=%s current=%s dir=%s acc=%s -> %s",
        last_speed, current_speed, direction_change, accuracy, result,
    )

    table = Table(title="Speed smoothing")
    table.add_column("Weight", justify="right")
    table.add_column("Smoothed", style="bold", justify="right")
    applied = "standstill" if current_speed < STANDSTILL_SPEED else f"{weight:.1f}"
    table.add_row(applied, f"{result:.2f}")

    console.print(table)
