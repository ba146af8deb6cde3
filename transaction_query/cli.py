# transaction_query/cli.py
import logging

import click
from dotenv import load_dotenv

from transaction_query.config import default_log_level, load_config
from transaction_query.outputs import get_output
from transaction_query.report import build_report
from transaction_query.sample import SAMPLE_TRANSACTIONS
from transaction_query.utils import to_date

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Accepted by --year/--month/--day to match any value of that component.
ANY = 'any'


def _iso_date(ctx, param, value):
    if value is None:
        return None
    try:
        return to_date(value).isoformat()
    except ValueError as exc:
        raise click.BadParameter(f"expected YYYY-MM-DD, got '{value}'") from exc


def _date_component(ctx, param, value):
    if value is None:
        return None
    if value.lower() == ANY:
        return ANY
    try:
        return int(value)
    except ValueError as exc:
        raise click.BadParameter(f"expected an integer or '{ANY}', got '{value}'") from exc


@click.command()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional config.yaml overriding output modules and query arguments'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file (e.g. TXNQUERY_LOG_LEVEL)'
)
@click.option(
    '--output', 'output_format',
    default='console',
    type=click.Choice(['console', 'json']),
    help='Output target: console or json'
)
@click.option('--year', default=None, callback=_date_component,
              help="Year for total_amount_by_date, or 'any'")
@click.option('--month', default=None, callback=_date_component,
              help="Month for total_amount_by_date, or 'any'")
@click.option('--day', default=None, callback=_date_component,
              help="Day for total_amount_by_date, or 'any' to match every day")
@click.option('--type', 'tx_type', default=None, help='Transaction type for by_type')
@click.option('--start', 'start_date', default=None, callback=_iso_date,
              help='Inclusive start date (YYYY-MM-DD) for in_date_range')
@click.option('--end', 'end_date', default=None, callback=_iso_date,
              help='Inclusive end date (YYYY-MM-DD) for in_date_range')
@click.option('--merchant', default=None, help='Merchant name for by_merchant')
@click.option('--min-amount', type=float, default=None, help='Lower bound for by_amount_range')
@click.option('--max-amount', type=float, default=None, help='Upper bound for by_amount_range')
@click.option('--before', 'before_date', default=None, callback=_iso_date,
              help='Exclusive cutoff date (YYYY-MM-DD) for before_date')
@click.option('--id', 'transaction_id', default=None, help='Transaction id for find_by_id')
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help='Logging level (default: $TXNQUERY_LOG_LEVEL or WARNING)'
)
def main(config_path, env_file, output_format, year, month, day, tx_type,
         start_date, end_date, merchant, min_amount, max_amount, before_date,
         transaction_id, log_level):
    """
    Run every transaction query over the built-in sample dataset and print
    the results. Query arguments come from the defaults, then the config
    file's 'queries' section, then the options given here.
    """
    if env_file:
        load_dotenv(env_file)
    level = (log_level or default_log_level()).upper()
    if level not in LOG_LEVELS:
        raise click.ClickException(
            f"Invalid log level '{level}' from $TXNQUERY_LOG_LEVEL; "
            f"expected one of {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(level=level)

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error loading config: {e}") from e

    params = dict(cfg['queries'])
    overrides = {
        'year': year,
        'month': month,
        'day': day,
        'type': tx_type,
        'start_date': start_date,
        'end_date': end_date,
        'merchant': merchant,
        'min_amount': min_amount,
        'max_amount': max_amount,
        'before_date': before_date,
        'transaction_id': transaction_id,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})
    for component in ('year', 'month', 'day'):
        if params[component] == ANY:
            params[component] = None
    logger.info("Running queries over %d transaction(s) with %s",
                len(SAMPLE_TRANSACTIONS), params)

    try:
        report = build_report(SAMPLE_TRANSACTIONS, params)
    except ValueError as e:
        raise click.ClickException(f"Invalid query arguments: {e}") from e

    try:
        outputter = get_output(output_format, cfg)
    except (ImportError, AttributeError, ValueError) as e:
        raise click.ClickException(f"Could not load output '{output_format}': {e}") from e
    outputter.write(report)
