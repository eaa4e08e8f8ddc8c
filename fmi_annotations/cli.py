"""Command line interface for converting FMI annotation blocks."""

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore[import-untyped]
from dotenv import load_dotenv

from fmi_annotations import serialization
from fmi_annotations.schema import DecodeError, Fmi3Annotations

try:
    __version__ = version("fmi-annotations")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

logger = logging.getLogger(__name__)


def _log_level(debug: bool, trace: bool) -> int:
    """Map the verbosity flags to a logging level; trace wins over debug."""

    if trace:
        return 1
    return logging.DEBUG if debug else logging.INFO


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="FMI_ANNOTATIONS_LOG_FILE",
    help="Append log records to FILE instead of standard error.",
)
@click.version_option(__version__, prog_name="fmi-annotations")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Read and write FMI 3.0 <Annotations> blocks.

    Args:
        debug: Log decoding details.
        trace: Log everything, including the lowest level records.
        log_file: Destination for log records, also read from
            ``FMI_ANNOTATIONS_LOG_FILE``.
    """
    level = _log_level(debug, trace)
    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.debug("Logging at level %d", level)

    # Pick up FMI_ANNOTATIONS_* settings from a local .env file.
    load_dotenv()


def _write_or_echo(content: str, final_path: Optional[Path]) -> None:
    """Write ``content`` to ``final_path`` or print it to the console."""

    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@click.argument("input_path", metavar="INPUT")
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(serialization.FORMATS),
    default="json",
    help="Output format.",
)
def decode(
    input_path: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Convert an <Annotations> XML fragment to structured data.

    Args:
        input_path: File holding the fragment, or ``-`` for standard input.
        output_path: Optional file or directory for the converted data.
            If a directory is provided, the file name is derived from the
            input file name.
        output_format: Format of the converted data.
    """

    with click.open_file(input_path, "rb") as stream:
        raw = stream.read()

    try:
        container = Fmi3Annotations.decode(raw)
    except DecodeError as exc:
        logger.debug("Decoding %s failed", input_path, exc_info=True)
        raise click.ClickException(str(exc)) from exc

    logger.debug(
        "Read %d annotation(s) from %s",
        len(container.annotations),
        input_path,
    )

    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)

        # Name the file after the input when given a directory.
        if final_path.is_dir():
            stem = Path(input_path).stem if input_path != "-" else "stdin"
            extension = serialization.EXTENSIONS[output_format]
            final_path = final_path / f"{stem}{extension}"

    content = serialization.dump_annotations(container, output_format)
    _write_or_echo(content, final_path)


@cli.command()
@click.argument("input_path", metavar="INPUT")
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write the XML fragment to FILE instead of the console.",
)
def encode(input_path: str, output_path: Optional[str] = None) -> None:
    """Convert structured JSON or YAML data to an <Annotations> fragment.

    Args:
        input_path: JSON or YAML file, or ``-`` for standard input.
        output_path: Optional file for the XML fragment.
    """

    with click.open_file(input_path, "r", encoding="utf-8") as stream:
        text = stream.read()

    fmt = (
        "yaml"
        if input_path == "-"
        else serialization.format_for_path(Path(input_path))
    )

    try:
        container = serialization.load_annotations(text, fmt)
    except (DecodeError, ValueError, yaml.YAMLError) as exc:
        logger.debug("Loading %s failed", input_path, exc_info=True)
        raise click.ClickException(str(exc)) from exc

    final_path = Path(output_path) if output_path else None
    _write_or_echo(container.encode(), final_path)
