import dataclasses
from datetime import date

import pytest

from transaction_query.core.models import Transaction
from transaction_query.sample import SAMPLE_TRANSACTIONS


def test_from_dict_long_field_names():
    tx = Transaction.from_dict({
        'transaction_id': '1',
        'transaction_date': '2019-01-01',
        'transaction_amount': 100,
        'transaction_type': 'debit',
        'transaction_description': 'Payment for groceries',
        'merchant_name': 'SuperMart',
        'card_type': 'Visa',
    })
    assert tx == Transaction(
        id='1',
        date=date(2019, 1, 1),
        amount=100.0,
        type='debit',
        description='Payment for groceries',
        merchant_name='SuperMart',
        card_type='Visa',
    )


def test_from_dict_short_field_names_and_date_values():
    tx = Transaction.from_dict({
        'id': 7,
        'date': date(2020, 5, 4),
        'amount': '12.5',
        'type': 'credit',
    })
    assert tx.id == '7'
    assert tx.date == date(2020, 5, 4)
    assert tx.amount == 12.5
    assert tx.description == ''
    assert tx.merchant_name == ''


@pytest.mark.parametrize(
    "entry",
    [
        {'date': '2019-01-01', 'amount': 1},
        {'id': '1', 'amount': 1},
    ],
)
def test_from_dict_requires_id_and_date(entry):
    with pytest.raises(ValueError):
        Transaction.from_dict(entry)


def test_transactions_are_immutable():
    tx = SAMPLE_TRANSACTIONS[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        tx.amount = 0.0


def test_sample_dataset_shape():
    assert [tx.id for tx in SAMPLE_TRANSACTIONS] == [str(i) for i in range(1, 11)]
    assert [tx.date for tx in SAMPLE_TRANSACTIONS] == [
        date(2019, 1, d) for d in range(1, 11)
    ]
    types = [tx.type for tx in SAMPLE_TRANSACTIONS]
    assert types.count('debit') == 7
    assert types.count('credit') == 3
