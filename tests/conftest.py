from datetime import date

import pytest

from transaction_query.core.models import Transaction
from transaction_query.sample import SAMPLE_TRANSACTIONS


def _make_tx(id_, day, amount=10.0, type_='debit', merchant='Shop', description=''):
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return Transaction(
        id=id_,
        date=day,
        amount=amount,
        type=type_,
        description=description or f"tx {id_}",
        merchant_name=merchant,
        card_type='Visa',
    )


@pytest.fixture
def make_tx():
    """Factory for Transactions; the day is an ISO string or a date."""
    return _make_tx


@pytest.fixture
def txs():
    return list(SAMPLE_TRANSACTIONS)
