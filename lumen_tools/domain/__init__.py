"""Domain models - plain value objects, no I/O."""

from .account import (
    AccountQueryResult,
    AccountSnapshot,
    BalanceBatchResult,
    BalanceClassification,
    BalanceLine,
    BalanceSummary,
    CreatedAccount,
    ReserveReport,
)
from .payment import PaymentBatchResult, PaymentOutcome, PaymentReceipt, PaymentRequest

__all__ = [
    "AccountQueryResult",
    "AccountSnapshot",
    "BalanceBatchResult",
    "BalanceClassification",
    "BalanceLine",
    "BalanceSummary",
    "CreatedAccount",
    "ReserveReport",
    "PaymentBatchResult",
    "PaymentOutcome",
    "PaymentReceipt",
    "PaymentRequest",
]
