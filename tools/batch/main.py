"""
CLI tool to prepare a batch of barcode values for rendering.

Every value is validated, checksum-applied and normalized; the report lists
what would be handed to the renderer and why rejected values failed.

Usage:
    python -m tools.batch.main --barcode-format EAN13 --checksum ean13 --input values.txt
    python -m tools.batch.main --barcode-format CODE39 --random --count 20 --length 10
    cat values.txt | python -m tools.batch.main -b ITF -c mod10 --format markdown
"""

import csv
import random
import sys
from io import StringIO

import click  # type: ignore
import structlog

from barcodestudio.barcode import (
    BarcodeError,
    applicable_checksums,
    generate_random_values,
    parse_value_list,
    prepare_batch,
)
from barcodestudio.config import configure_logging, get_settings
from barcodestudio.models import BarcodeFormat, BatchEntry, ChecksumKind

logger = structlog.get_logger(__name__)

COLUMNS = ["value", "valid", "encoded", "render_value", "message"]


def _row(entry: BatchEntry) -> list[str]:
    return [
        entry.value,
        "yes" if entry.valid else "no",
        entry.encoded or "",
        entry.render_value or "",
        entry.message,
    ]


def format_csv(entries: list[BatchEntry]) -> str:
    """Format entries as CSV."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(COLUMNS)
    for entry in entries:
        writer.writerow(_row(entry))
    return output.getvalue()


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def format_markdown(entries: list[BatchEntry]) -> str:
    """Format entries as markdown table."""
    lines = [
        "| " + " | ".join(COLUMNS) + " |",
        "|" + "|".join("-" * (len(c) + 2) for c in COLUMNS) + "|",
    ]
    for entry in entries:
        lines.append("| " + " | ".join(_cell(v) for v in _row(entry)) + " |")
    return "\n".join(lines)


def _check_limit(count: int, limit: int) -> None:
    if count > limit:
        raise click.ClickException(f"Batch has {count} values; the limit is {limit}")


@click.command()
@click.option(
    "--barcode-format", "-b",
    type=click.Choice([f.value for f in BarcodeFormat]),
    default=None,
    help="Barcode format (default: from settings)",
)
@click.option(
    "--checksum", "-c",
    type=click.Choice([k.value for k in ChecksumKind]),
    default=ChecksumKind.NONE.value,
    help="Checksum to append (default: none)",
)
@click.option(
    "--input", "-i",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="File with one value per line (defaults to stdin)",
)
@click.option(
    "--random", "-r",
    "use_random",
    is_flag=True,
    help="Generate random values instead of reading input",
)
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of random values (default: from settings)",
)
@click.option(
    "--length", "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Length of random values (default: from settings)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible random values",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file path (defaults to stdout)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["csv", "markdown"]),
    default="csv",
    help="Output format (default: csv)",
)
def main(
    barcode_format: str | None,
    checksum: str,
    input_file,
    use_random: bool,
    count: int | None,
    length: int | None,
    seed: int | None,
    output: str | None,
    output_format: str,
) -> None:
    """Validate and encode a batch of barcode values."""
    configure_logging()
    settings = get_settings()

    fmt = BarcodeFormat(barcode_format) if barcode_format else settings.default_format
    kind = ChecksumKind(checksum)

    if kind not in applicable_checksums(fmt):
        logger.warning("Checksum not offered for format", checksum=kind.value, format=fmt.value)

    if use_random:
        random_count = count or settings.batch_default_count
        _check_limit(random_count, settings.batch_max_values)
        values = generate_random_values(
            fmt,
            random_count,
            length or settings.batch_default_length,
            rng=random.Random(seed),
        )
    else:
        source = input_file or click.get_text_stream("stdin")
        values = parse_value_list(source.read())
        _check_limit(len(values), settings.batch_max_values)

    if not values:
        click.echo("Please enter at least one value", err=True)
        sys.exit(1)

    try:
        entries = prepare_batch(values, fmt, kind)
    except BarcodeError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "csv":
        content = format_csv(entries)
    else:
        content = format_markdown(entries)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        click.echo(f"Report written to: {output}")
    else:
        click.echo(content)

    if not any(e.valid for e in entries):
        sys.exit(2)


if __name__ == "__main__":
    main()
