"""Typer CLI for bed placement in a room."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from roomdesigner.application import LayoutSession
from roomdesigner.application.config import (
    ConfigError,
    config_to_session,
    load_config,
)
from roomdesigner.cli.commands import validate_command
from roomdesigner.domain.bed_sizes import BED_SIZES
from roomdesigner.domain.value_objects import DisplayedRect, RotationDirection
from roomdesigner.infrastructure import (
    BedSizeFormatter,
    FrameTraceFormatter,
    JsonLayoutFormatter,
    LayoutFormatter,
    ManualScheduler,
)
from roomdesigner.infrastructure.scheduling import DEFAULT_FRAME_MS

app = typer.Typer(
    name="room-designer",
    help="Place and rotate a bed inside a rectangular room.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Place and rotate a bed inside a rectangular room."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("roomdesigner").setLevel(logging.DEBUG)


def _load_session(config_file: Path, scheduler: ManualScheduler) -> LayoutSession:
    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return config_to_session(config, scheduler=scheduler)


def _echo_layout(session: LayoutSession, output_format: str, frames: list[float] | None = None) -> None:
    snapshot = session.snapshot()
    if output_format == "json":
        typer.echo(JsonLayoutFormatter().format(snapshot, frames))
        return
    if frames is not None:
        typer.echo(FrameTraceFormatter().format(frames))
        typer.echo()
    typer.echo(LayoutFormatter().format(snapshot))


def _check_format(output_format: str) -> str:
    normalized = output_format.lower()
    if normalized not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use 'text' or 'json'.", err=True)
        raise typer.Exit(code=1)
    return normalized


def _parse_rect(value: str) -> DisplayedRect:
    try:
        left, top, width, height = (float(part) for part in value.split(","))
        return DisplayedRect(left=left, top=top, width=width, height=height)
    except ValueError as e:
        raise typer.BadParameter(
            f"Expected 'left,top,width,height' with a positive size, got '{value}'"
        ) from e


@app.command()
def sizes() -> None:
    """List the bed size catalogue."""
    typer.echo(BedSizeFormatter().format(BED_SIZES))


@app.command()
def footprint(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON configuration file")],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Show the effective footprint and clamped position."""
    output_format = _check_format(output_format)
    session = _load_session(config_file, ManualScheduler())
    _echo_layout(session, output_format)


@app.command()
def rotate(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON configuration file")],
    direction: Annotated[
        RotationDirection,
        typer.Option("--direction", "-d", help="Rotation direction"),
    ] = RotationDirection.CLOCKWISE,
    times: Annotated[
        int, typer.Option("--times", "-n", min=1, help="Number of quarter turns")
    ] = 1,
    show_frames: Annotated[
        bool, typer.Option("--frames", help="Print the angle of every animation frame")
    ] = False,
    frame_ms: Annotated[
        float, typer.Option("--frame-ms", min=1.0, help="Simulated frame interval in ms")
    ] = DEFAULT_FRAME_MS,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Simulate one or more animated rotations and show the final layout."""
    output_format = _check_format(output_format)
    scheduler = ManualScheduler()
    session = _load_session(config_file, scheduler)

    frames: list[float] = []
    for _ in range(times):
        session.rotate(direction)
        while not scheduler.is_idle:
            if scheduler.run_frame(frame_ms):
                frames.append(session.rotation_state.current_angle)

    _echo_layout(session, output_format, frames if show_frames else None)


@app.command()
def place(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON configuration file")],
    x: Annotated[float, typer.Option("--x", help="Drop pointer x in pixels")],
    y: Annotated[float, typer.Option("--y", help="Drop pointer y in pixels")],
    rect: Annotated[
        str,
        typer.Option("--rect", help="Displayed room rectangle: left,top,width,height"),
    ],
    grab_x: Annotated[
        float, typer.Option("--grab-x", help="Grab offset x in pixels")
    ] = 0.0,
    grab_y: Annotated[
        float, typer.Option("--grab-y", help="Grab offset y in pixels")
    ] = 0.0,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Drop the bed at a pointer location and show the committed position."""
    output_format = _check_format(output_format)
    displayed = _parse_rect(rect)
    session = _load_session(config_file, ManualScheduler())
    session.drop(x, y, displayed, offset_payload=(grab_x, grab_y))
    _echo_layout(session, output_format)


if __name__ == "__main__":
    app()
