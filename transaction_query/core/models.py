# transaction_query/core/models.py
from dataclasses import dataclass
from datetime import date

from transaction_query.utils import to_date


@dataclass(frozen=True)
class Transaction:
    id: str
    date: date
    amount: float
    type: str
    description: str = ''
    merchant_name: str = ''
    card_type: str = ''

    @classmethod
    def from_dict(cls, entry):
        """
        Build a Transaction from a mapping. Accepts the short field names
        as well as the long transaction_* names used by literal datasets.
        """
        tx_id = entry.get('id', entry.get('transaction_id'))
        if tx_id is None:
            raise ValueError(f"Missing 'id' in transaction entry: {entry}")
        date_val = entry.get('date', entry.get('transaction_date'))
        if not date_val:
            raise ValueError(f"Missing 'date' in transaction entry: {entry}")
        return cls(
            id=str(tx_id),
            date=to_date(date_val),
            amount=float(entry.get('amount', entry.get('transaction_amount', 0.0))),
            type=entry.get('type', entry.get('transaction_type', '')),
            description=entry.get(
                'description', entry.get('transaction_description', '')
            ),
            merchant_name=entry.get('merchant_name', ''),
            card_type=entry.get('card_type', ''),
        )
