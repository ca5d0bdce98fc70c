"""Command-line entry point: export an index to a delimited text file."""

import logging
import sys

import click

from esexport.client import ExportClient
from esexport.config import ExportSettings
from esexport.exceptions import EsExportError
from esexport.writer import ColumnWriter

logger = logging.getLogger("esexport")

# CLI option name -> ExportSettings field
_OPTION_FIELDS = {
    "url": "url",
    "index": "index",
    "columns": "columns",
    "batch_size": "batch_size",
    "interval": "interval_ms",
    "term_filter": "term_filter",
    "wildcard_filter": "wildcard_filter",
    "regexp_filter": "regexp_filter",
    "proxy": "proxy_url",
    "timeout": "timeout_ms",
    "outfile": "outfile",
}


@click.command()
@click.option("-e", "--url", help="Engine url (env: ESEXPORT_URL)")
@click.option("-i", "--index", help="Index name (env: ESEXPORT_INDEX)")
@click.option("-c", "--columns", help="Fields to extract, comma separated")
@click.option("-b", "--batch-size", type=click.INT, help="Hits per scroll request")
@click.option("--interval", type=click.INT, help="Pause between scroll requests, in milliseconds")
@click.option("--tf", "term_filter", help="Term filters, as key:value,key:value...")
@click.option("--wf", "wildcard_filter", help="Wildcard filters, as key:value,key:value...")
@click.option("--rf", "regexp_filter", help="Regexp filters, as key:value,key:value...")
@click.option("-p", "--proxy", help="Proxy url, e.g. socks5://127.0.0.1:1800")
@click.option("-t", "--timeout", type=click.INT, help="Timeout per request, in milliseconds")
@click.option("-o", "--outfile", type=click.Path(dir_okay=False), help="Output file (appended to)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
def main(log_level, **options):
    """Export documents of an index, one line per hit."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    overrides = {
        _OPTION_FIELDS[name]: value
        for name, value in options.items()
        if value is not None
    }
    settings = ExportSettings(**overrides)
    
    logger.info("============ ES  CONFIG =====================")
    for name, value in settings.model_dump().items():
        logger.info("%s %s", name.upper(), value)
    logger.info("=============================================")
    
    if not settings.index:
        logger.error("index name must not be empty")
        sys.exit(1)
    
    try:
        with ColumnWriter(settings.outfile, settings.column_list) as writer, \
                ExportClient(settings) as client:
            count = client.walk(writer)
    except OSError as e:
        logger.error("open file %s error: %s", settings.outfile, e)
        sys.exit(1)
    except EsExportError as e:
        logger.error("walk es error: %s", e)
        sys.exit(1)
    
    logger.info("walk complete, total count %d", count)


if __name__ == "__main__":
    main()
