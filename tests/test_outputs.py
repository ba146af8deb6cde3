import json

import pytest

from transaction_query.config import load_config
from transaction_query.outputs import get_output
from transaction_query.outputs.console_output import (
    ConsoleOutput,
    format_result,
    transactions_frame,
)
from transaction_query.outputs.json_output import JSONOutput
from transaction_query.report import build_report


def test_build_report_labels_and_defaults(txs):
    report = build_report(txs)
    labels = [label for label, _ in report]
    assert labels == [
        'unique_types',
        'total_amount',
        'total_amount_by_date',
        'by_type',
        'in_date_range',
        'by_merchant',
        'average_amount',
        'by_amount_range',
        'total_debit_amount',
        'most_active_month',
        'most_active_debit_month',
        'dominant_type',
        'before_date',
        'find_by_id',
        'descriptions',
    ]
    results = dict(report)
    assert results['total_amount_by_date'] == 75.0
    assert results['find_by_id'].merchant_name == 'OnlineShop'
    assert len(results['by_type']) == 7


def test_build_report_on_empty_input_is_all_none():
    assert all(result is None for _, result in build_report([]))


def test_build_report_overrides(txs):
    results = dict(build_report(txs, {'merchant': 'Cafe123', 'transaction_id': '999'}))
    assert [tx.id for tx in results['by_merchant']] == ['7']
    assert results['find_by_id'] is None


def test_transactions_frame(txs):
    df = transactions_frame(txs[:3])
    assert list(df['id']) == ['1', '2', '3']
    assert list(df.columns) == [
        'id', 'date', 'amount', 'type', 'description', 'merchant_name', 'card_type'
    ]


def test_format_result(txs):
    assert format_result(None) == 'null'
    assert format_result(73.0) == '73.0'
    assert format_result([]) == '[]'
    assert format_result(['debit', 'credit']) == "['debit', 'credit']"
    assert 'SuperMart' in format_result(txs[:1])
    assert 'OnlineShop' in format_result(txs[1])


def test_console_output_writes_labels(txs, capsys):
    ConsoleOutput({}).write([('dominant_type', 'debit'), ('find_by_id', None)])
    out = capsys.readouterr().out
    assert 'dominant_type:\ndebit\n' in out
    assert 'find_by_id:\nnull\n' in out


def test_json_output(txs, capsys):
    JSONOutput({'json_indent': None}).write(build_report(txs))
    payload = json.loads(capsys.readouterr().out)
    assert payload['dominant_type'] == 'debit'
    assert payload['find_by_id']['date'] == '2019-01-02'
    assert [t['id'] for t in payload['in_date_range']] == ['1', '2']
    assert payload['most_active_month'] == '2019-01'


def test_get_output_resolves_configured_class():
    cfg = load_config()
    assert isinstance(get_output('console', cfg), ConsoleOutput)
    assert isinstance(get_output('json', cfg), JSONOutput)
    with pytest.raises(ValueError):
        get_output('sheets', cfg)
