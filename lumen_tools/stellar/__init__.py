# lumen_tools/stellar/__init__.py
"""
Stellar batch utilities.

- reserve_calc: Reserve and available balance arithmetic
- balance_report: Sequential balance queries with totals
- payment_batch: Sequential native payments
- account_factory: Keypair generation and Friendbot funding
- sdk_utils / payment_service: stellar_sdk adapters
- display_commands: Report lines
- commands: CLI-facing commands
"""

from .exceptions import (
    StellarToolsError,
    AccountNotFound,
    TransportError,
    SubmissionRejected,
    ConfigurationError,
)

from .reserve_calc import compute_reserve, classify_balances, to_decimal

from .balance_report import (
    build_query_result,
    query_account,
    summarize_balances,
    run_balance_batch,
)

from .payment_batch import parse_amount, run_payment_batch

from .account_factory import (
    generate_keypair,
    fund_with_friendbot,
    run_account_creation,
)

from .sdk_utils import load_account_snapshot, snapshot_from_horizon

from .payment_service import send_payment_async

from .address_utils import (
    is_valid_public_key,
    validate_public_keys,
    shorten_address,
)


__all__ = [
    # Errors
    "StellarToolsError",
    "AccountNotFound",
    "TransportError",
    "SubmissionRejected",
    "ConfigurationError",
    # Reserve
    "compute_reserve",
    "classify_balances",
    "to_decimal",
    # Balance batch
    "build_query_result",
    "query_account",
    "summarize_balances",
    "run_balance_batch",
    # Payment batch
    "parse_amount",
    "run_payment_batch",
    # Accounts
    "generate_keypair",
    "fund_with_friendbot",
    "run_account_creation",
    # SDK
    "load_account_snapshot",
    "snapshot_from_horizon",
    "send_payment_async",
    # Address
    "is_valid_public_key",
    "validate_public_keys",
    "shorten_address",
]
