# transaction_query/utils.py
from datetime import date, datetime


def to_date(value):
    """Coerce an ISO 'YYYY-MM-DD' string (or a date/datetime) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


def month_key(tx):
    """
    Return the 'YYYY-MM' month a transaction falls in.
    """
    return f"{tx.date.year:04d}-{tx.date.month:02d}"
