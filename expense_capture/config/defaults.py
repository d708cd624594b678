"""
Default keyword tables used when no configuration file is supplied.

Category and payment tables are ordered: the first entry with a matching
keyword wins, so reordering them changes results.
"""

from ..models import PaymentMethod

DEFAULT_CATEGORY = "Other"

CATEGORY_KEYWORDS = {
    'FOOD': [
        'food', 'restaurant', 'cafe', 'swiggy', 'zomato', 'eat',
        'lunch', 'dinner', 'burger', 'pizza', 'biryani'
    ],
    'TRAVEL': [
        'uber', 'ola', 'taxi', 'cab', 'metro', 'auto', 'train',
        'flight', 'bus', 'fuel', 'petrol', 'diesel'
    ],
    'GROCERY': [
        'grocery', 'dmart', 'market', 'milk', 'vegetables', 'kirana',
        'mart', 'store', 'mandi'
    ],
    'HOTEL': ['hotel', 'lodge', 'resort', 'stay', 'inn'],
    'ROOM STAY': ['rent', 'pg', 'hostel', 'accommodation'],
}

MERCHANT_KEYWORDS = [
    'GPay', 'PhonePe', 'Paytm', 'Amazon', 'Flipkart', 'Jio',
    'Zomato', 'Swiggy', 'Uber', 'Ola', 'D-Mart', 'Reliance',
]

# Printed headers that are never the merchant name
MERCHANT_SKIP_LINES = [
    'receipt', 'tax invoice', 'invoice', 'bill', 'cash memo',
    'cash receipt', 'estimate', 'duplicate', 'original',
]

MERCHANT_SCAN_LINES = 5

PAYMENT_KEYWORDS = {
    PaymentMethod.UPI: ['upi', 'gpay', 'phonepe'],
    PaymentMethod.CASH: ['cash'],
    PaymentMethod.CARD: ['card', 'visa', 'mastercard', 'swipe'],
}

DEFAULT_PAYMENT_METHOD = PaymentMethod.UPI

ACCEPTED_PAYMENT_METHODS = [PaymentMethod.UPI, PaymentMethod.CASH, PaymentMethod.CARD]
