# transaction_query/report.py
from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from transaction_query import queries
from transaction_query.config import DEFAULT_QUERY_PARAMS
from transaction_query.core.models import Transaction


def build_report(
    transactions: Sequence[Transaction],
    params: Mapping[str, Any] | None = None,
) -> List[Tuple[str, Any]]:
    """Run every query against *transactions* and return (label, result) pairs.

    Parameters
    ----------
    transactions:
        The sequence every query runs over.
    params:
        Query arguments; keys missing here fall back to DEFAULT_QUERY_PARAMS.
    """
    p = dict(DEFAULT_QUERY_PARAMS)
    p.update(params or {})

    return [
        ("unique_types", queries.unique_types(transactions)),
        ("total_amount", queries.total_amount(transactions)),
        (
            "total_amount_by_date",
            queries.total_amount_by_date(
                transactions, p['year'], p['month'], p['day']
            ),
        ),
        ("by_type", queries.by_type(transactions, p['type'])),
        (
            "in_date_range",
            queries.in_date_range(transactions, p['start_date'], p['end_date']),
        ),
        ("by_merchant", queries.by_merchant(transactions, p['merchant'])),
        ("average_amount", queries.average_amount(transactions)),
        (
            "by_amount_range",
            queries.by_amount_range(transactions, p['min_amount'], p['max_amount']),
        ),
        ("total_debit_amount", queries.total_debit_amount(transactions)),
        ("most_active_month", queries.most_active_month(transactions)),
        ("most_active_debit_month", queries.most_active_debit_month(transactions)),
        ("dominant_type", queries.dominant_type(transactions)),
        ("before_date", queries.before_date(transactions, p['before_date'])),
        ("find_by_id", queries.find_by_id(transactions, p['transaction_id'])),
        ("descriptions", queries.descriptions(transactions)),
    ]
