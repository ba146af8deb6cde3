# transaction_query/queries.py
"""
Read-only queries over an in-memory sequence of Transaction records.

Every function takes the sequence as its first argument and returns None
when that sequence is empty. Filters over a non-empty sequence that match
nothing return an empty list, not None.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Union

from transaction_query.core.models import Transaction
from transaction_query.utils import month_key, to_date

DEBIT = "debit"
CREDIT = "credit"
EQUAL = "equal"

DateLike = Union[str, date]
Amount = Union[float, Decimal]


def unique_types(transactions: Sequence[Transaction]) -> Optional[List[str]]:
    """Distinct transaction types in order of first occurrence."""
    if not transactions:
        return None
    return list(dict.fromkeys(tx.type for tx in transactions))


def total_amount(transactions: Sequence[Transaction]) -> Optional[Amount]:
    if not transactions:
        return None
    return sum(tx.amount for tx in transactions)


def total_amount_by_date(
    transactions: Sequence[Transaction],
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> Optional[Amount]:
    """
    Sum the amounts of transactions whose date matches every given
    component. An omitted (None) component matches any value, and a
    non-empty sequence with no matching records sums to 0.
    """
    if not transactions:
        return None
    return sum(
        tx.amount
        for tx in transactions
        if (year is None or tx.date.year == year)
        and (month is None or tx.date.month == month)
        and (day is None or tx.date.day == day)
    )


def by_type(
    transactions: Sequence[Transaction], type_: str
) -> Optional[List[Transaction]]:
    if not transactions:
        return None
    return [tx for tx in transactions if tx.type == type_]


def in_date_range(
    transactions: Sequence[Transaction], start: DateLike, end: DateLike
) -> Optional[List[Transaction]]:
    """Transactions dated between start and end, both inclusive."""
    if not transactions:
        return None
    start, end = to_date(start), to_date(end)
    return [tx for tx in transactions if start <= tx.date <= end]


def by_merchant(
    transactions: Sequence[Transaction], merchant_name: str
) -> Optional[List[Transaction]]:
    if not transactions:
        return None
    return [tx for tx in transactions if tx.merchant_name == merchant_name]


def average_amount(transactions: Sequence[Transaction]) -> Optional[Amount]:
    if not transactions:
        return None
    return total_amount(transactions) / len(transactions)


def by_amount_range(
    transactions: Sequence[Transaction], min_amount: Amount, max_amount: Amount
) -> Optional[List[Transaction]]:
    if not transactions:
        return None
    return [tx for tx in transactions if min_amount <= tx.amount <= max_amount]


def total_debit_amount(transactions: Sequence[Transaction]) -> Optional[Amount]:
    if not transactions:
        return None
    return sum(tx.amount for tx in transactions if tx.type == DEBIT)


def _busiest_month(transactions: Sequence[Transaction]) -> str:
    counts: Dict[str, int] = {}
    for tx in transactions:
        key = month_key(tx)
        counts[key] = counts.get(key, 0) + 1

    # Strictly greater only, so the first month seen wins a tie.
    busiest = ""
    for key, count in counts.items():
        if not busiest or count > counts[busiest]:
            busiest = key
    return busiest


def most_active_month(transactions: Sequence[Transaction]) -> Optional[str]:
    """The 'YYYY-MM' month holding the most transactions."""
    if not transactions:
        return None
    return _busiest_month(transactions)


def most_active_debit_month(transactions: Sequence[Transaction]) -> Optional[str]:
    """
    The 'YYYY-MM' month holding the most debit transactions, or an empty
    string when the sequence has no debits at all.
    """
    if not transactions:
        return None
    return _busiest_month([tx for tx in transactions if tx.type == DEBIT])


def dominant_type(transactions: Sequence[Transaction]) -> Optional[str]:
    """Return 'debit', 'credit' or 'equal' depending on which is more common."""
    if not transactions:
        return None
    debit_count = sum(1 for tx in transactions if tx.type == DEBIT)
    credit_count = sum(1 for tx in transactions if tx.type == CREDIT)
    if debit_count > credit_count:
        return DEBIT
    if credit_count > debit_count:
        return CREDIT
    return EQUAL


def before_date(
    transactions: Sequence[Transaction], cutoff: DateLike
) -> Optional[List[Transaction]]:
    if not transactions:
        return None
    cutoff = to_date(cutoff)
    return [tx for tx in transactions if tx.date < cutoff]


def find_by_id(
    transactions: Sequence[Transaction], id_: str
) -> Optional[Transaction]:
    """First transaction with the given id; None if absent or the input is empty."""
    if not transactions:
        return None
    return next((tx for tx in transactions if tx.id == id_), None)


def descriptions(transactions: Sequence[Transaction]) -> Optional[List[str]]:
    if not transactions:
        return None
    return [tx.description for tx in transactions]
