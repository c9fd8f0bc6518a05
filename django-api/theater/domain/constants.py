"""Pricing and volume credit constants.

Amounts are in cents.
"""

CENTS_PER_DOLLAR = 100

TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5
