import click
import pydantic

from catalog.infrastructure.bootstrap import setup_logging
from catalog.infrastructure.cli.product_commands import product_session

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides CATALOG_LOG_LEVEL).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Emit logs as JSON lines.",
)
def cli(log_level: str | None, json_logs: bool | None) -> None:
    """Catalog — in-memory product registry"""
    try:
        setup_logging(level=log_level, json_logs=json_logs)
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    except ValueError as exc:
        raise click.ClickException(f"Cannot configure logging: {exc}")


# Register subcommands
cli.add_command(product_session)
