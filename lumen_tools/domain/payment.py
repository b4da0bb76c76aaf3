# lumen_tools/domain/payment.py
"""Payment domain models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PaymentRequest:
    """Destination and memo of one payment in a batch."""
    destination: str
    memo: str = ""


@dataclass(frozen=True)
class PaymentReceipt:
    """What the ledger returns for an accepted transaction."""
    hash: str
    ledger: int
    source_balance: Optional[Decimal] = None


@dataclass(frozen=True)
class PaymentOutcome:
    """
    Result of one attempted payment.

    ``index`` is the 1-based position in the input list.
    """
    index: int
    destination: str
    memo: str
    success: bool
    hash: Optional[str] = None
    ledger: Optional[int] = None
    source_balance: Optional[Decimal] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None


@dataclass(frozen=True)
class PaymentBatchResult:
    amount: Decimal
    results: list[PaymentOutcome] = field(default_factory=list)
    success_count: int = 0

    @property
    def failure_count(self) -> int:
        return len(self.results) - self.success_count

    @property
    def total_sent(self) -> Decimal:
        """XLM actually sent, fees excluded."""
        return self.amount * self.success_count
