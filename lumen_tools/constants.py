# lumen_tools/constants.py
"""Network endpoints, reserve parameters and batch pacing."""

from decimal import Decimal

TESTNET_HORIZON_URL = "https://horizon-testnet.stellar.org"
FRIENDBOT_URL = "https://friendbot.stellar.org"

# Reserve rules: 0.5 XLM for the account itself plus 0.5 XLM per subentry
BASE_RESERVE = Decimal("0.5")
SUBENTRY_RESERVE = Decimal("0.5")

# Ledger amounts carry 7 fractional digits
AMOUNT_PRECISION = Decimal("0.0000001")

FRIENDBOT_STARTING_BALANCE = Decimal("10000")

MAX_TEXT_MEMO_BYTES = 28
TRANSACTION_TIMEOUT = 30  # seconds

# Pauses between batch items, milliseconds
BALANCE_QUERY_DELAY_MS = 500
PAYMENT_DELAY_MS = 1000
ACCOUNT_CREATION_DELAY_MS = 1000
