"""
CLI tool to calculate every supported checksum for a value.

Usage:
    python -m tools.checksum_calculator.main 7992739871
    python -m tools.checksum_calculator.main CODE39 --format json
"""

import json
import sys

import click  # type: ignore
import structlog

from barcodestudio.barcode.calculator import calculate_all
from barcodestudio.config import configure_logging
from barcodestudio.models import ChecksumResult

logger = structlog.get_logger(__name__)


def format_table(value: str, results: list[ChecksumResult]) -> str:
    """Format calculator rows as a fixed-width table."""
    lines = [
        f"Checksums for: {value}",
        "-" * 72,
        f"{'Algorithm':<22} {'Check':<6} {'Full value':<40}",
        "-" * 72,
    ]
    for r in results:
        lines.append(f"{r.name:<22} {r.value:<6} {r.full_value:<40}")
    lines.append("-" * 72)
    applicable = sum(1 for r in results if r.applicable)
    lines.append(f"Applicable: {applicable}/{len(results)}")
    return "\n".join(lines)


def format_json(results: list[ChecksumResult]) -> str:
    return json.dumps([r.model_dump(mode="json") for r in results], indent=2)


@click.command()
@click.argument("value")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--applicable-only", "-a",
    is_flag=True,
    default=False,
    help="Hide algorithms that do not apply to the value",
)
def main(value: str, output_format: str, applicable_only: bool) -> None:
    """Calculate all checksums for VALUE."""
    configure_logging()

    results = calculate_all(value)
    if not results:
        click.echo("Please enter a value", err=True)
        sys.exit(1)

    if applicable_only:
        results = [r for r in results if r.applicable]

    logger.debug("Checksums calculated", rows=len(results))

    if output_format == "json":
        click.echo(format_json(results))
    else:
        click.echo(format_table(value, results))


if __name__ == "__main__":
    main()
