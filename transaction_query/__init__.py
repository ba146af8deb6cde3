from transaction_query.core.models import Transaction
from transaction_query.queries import (
    average_amount,
    before_date,
    by_amount_range,
    by_merchant,
    by_type,
    descriptions,
    dominant_type,
    find_by_id,
    in_date_range,
    most_active_debit_month,
    most_active_month,
    total_amount,
    total_amount_by_date,
    total_debit_amount,
    unique_types,
)

__all__ = [
    "Transaction",
    "average_amount",
    "before_date",
    "by_amount_range",
    "by_merchant",
    "by_type",
    "descriptions",
    "dominant_type",
    "find_by_id",
    "in_date_range",
    "most_active_debit_month",
    "most_active_month",
    "total_amount",
    "total_amount_by_date",
    "total_debit_amount",
    "unique_types",
]
