# transaction_query/outputs/console_output.py
from dataclasses import asdict

import click
import pandas as pd

from transaction_query.core.models import Transaction
from transaction_query.outputs.base import BaseOutput

_COLUMNS = ['id', 'date', 'amount', 'type', 'description', 'merchant_name', 'card_type']


def transactions_frame(transactions):
    """Tabulate transactions in a DataFrame, one row per record."""
    return pd.DataFrame([asdict(tx) for tx in transactions], columns=_COLUMNS)


def format_result(result):
    if result is None:
        return "null"
    if isinstance(result, Transaction):
        return transactions_frame([result]).to_string(index=False)
    if isinstance(result, list) and result and all(
        isinstance(r, Transaction) for r in result
    ):
        return transactions_frame(result).to_string(index=False)
    return str(result)


class ConsoleOutput(BaseOutput):
    """
    Prints each query result under its label, tabulating transaction lists.
    """
    def __init__(self, config):
        self.config = config

    def write(self, report):
        for label, result in report:
            click.echo(f"{label}:")
            click.echo(format_result(result))
            click.echo("")
