from typing import Optional

import click

from config.settings import settings
from ingestion.receipts.exporters.console_item_exporter import ConsoleItemExporter
from ingestion.receipts.service.receipt_file_service import decode_receipts_from_path
from utils.exceptions import ReceiptImportError
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Import Receipts")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-p",
    "--path",
    default=settings.receipts.path,
    show_default=True,
    type=str,
    help="The path to the receipts export.",
)
@click.option(
    "--max-nesting-depth",
    default=settings.receipts.max_nesting_depth,
    show_default=True,
    type=click.IntRange(min=1),
    help="How many levels of receipt batches may be nested below the root list.",
)
@click.option(
    "--rlp-max-depth",
    default=settings.receipts.rlp_max_depth,
    show_default=True,
    type=click.IntRange(min=1),
    help="How many RLP lists may be open at once while reading the export.",
)
@click.option(
    "--require-receipts/--allow-empty",
    default=settings.receipts.require_receipts,
    show_default=True,
    help="Fail when the export decodes to zero receipts.",
)
@click.option("--print-receipts", is_flag=True, default=False, help="Print every decoded receipt as JSON.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
@click.option("--log-level", default=settings.app.log_level, show_default=True, type=str, help="Logging level.")
def import_receipts(
    path: str,
    max_nesting_depth: int,
    rlp_max_depth: int,
    require_receipts: bool,
    print_receipts: bool,
    log_file: Optional[str] = None,
    log_level: str = "INFO",
):
    """Loads receipts from an RLP encoded legacy receipts export."""
    configure_logging(log_file, log_level)

    logger.info(f'loading receipts file "{path}"')
    try:
        receipts = decode_receipts_from_path(
            path,
            max_nesting_depth=max_nesting_depth,
            rlp_max_depth=rlp_max_depth,
            require_receipts=require_receipts,
        )
    except (OSError, ReceiptImportError) as e:
        logger.error(f'Failed to decode receipts file "{path}": {e}')
        raise click.ClickException(f"{path}: {e}") from e

    logger.info(f"got {len(receipts)} receipts")

    if print_receipts:
        exporter = ConsoleItemExporter()
        exporter.open()
        try:
            exporter.export_items(receipts)
        finally:
            exporter.close()
