# transaction_query/sample.py
from transaction_query.core.models import Transaction

_SAMPLE_ENTRIES = [
    {
        'transaction_id': '1',
        'transaction_date': '2019-01-01',
        'transaction_amount': 100.0,
        'transaction_type': 'debit',
        'transaction_description': 'Payment for groceries',
        'merchant_name': 'SuperMart',
        'card_type': 'Visa',
    },
    {
        'transaction_id': '2',
        'transaction_date': '2019-01-02',
        'transaction_amount': 50.0,
        'transaction_type': 'credit',
        'transaction_description': 'Refund for returned item',
        'merchant_name': 'OnlineShop',
        'card_type': 'MasterCard',
    },
    {
        'transaction_id': '3',
        'transaction_date': '2019-01-03',
        'transaction_amount': 75.0,
        'transaction_type': 'debit',
        'transaction_description': 'Dinner with friends',
        'merchant_name': 'RestaurantABC',
        'card_type': 'Amex',
    },
    {
        'transaction_id': '4',
        'transaction_date': '2019-01-04',
        'transaction_amount': 120.0,
        'transaction_type': 'debit',
        'transaction_description': 'Shopping at Mall',
        'merchant_name': 'FashionStoreXYZ',
        'card_type': 'Discover',
    },
    {
        'transaction_id': '5',
        'transaction_date': '2019-01-05',
        'transaction_amount': 25.0,
        'transaction_type': 'credit',
        'transaction_description': 'Returned defective product',
        'merchant_name': 'ElectronicsShop',
        'card_type': 'Visa',
    },
    {
        'transaction_id': '6',
        'transaction_date': '2019-01-06',
        'transaction_amount': 60.0,
        'transaction_type': 'debit',
        'transaction_description': 'Gasoline refill',
        'merchant_name': 'GasStationXYZ',
        'card_type': 'MasterCard',
    },
    {
        'transaction_id': '7',
        'transaction_date': '2019-01-07',
        'transaction_amount': 40.0,
        'transaction_type': 'debit',
        'transaction_description': 'Lunch with colleagues',
        'merchant_name': 'Cafe123',
        'card_type': 'Visa',
    },
    {
        'transaction_id': '8',
        'transaction_date': '2019-01-08',
        'transaction_amount': 90.0,
        'transaction_type': 'debit',
        'transaction_description': 'Movie tickets',
        'merchant_name': 'CinemaXYZ',
        'card_type': 'Amex',
    },
    {
        'transaction_id': '9',
        'transaction_date': '2019-01-09',
        'transaction_amount': 150.0,
        'transaction_type': 'debit',
        'transaction_description': 'Weekend getaway',
        'merchant_name': 'ResortABC',
        'card_type': 'Discover',
    },
    {
        'transaction_id': '10',
        'transaction_date': '2019-01-10',
        'transaction_amount': 20.0,
        'transaction_type': 'credit',
        'transaction_description': 'Cashback reward',
        'merchant_name': 'BankXYZ',
        'card_type': 'Visa',
    },
]

SAMPLE_TRANSACTIONS = tuple(Transaction.from_dict(e) for e in _SAMPLE_ENTRIES)
