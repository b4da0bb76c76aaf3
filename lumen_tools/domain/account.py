# lumen_tools/domain/account.py
"""Account domain models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class BalanceLine:
    """Single entry of an account's balances array."""
    asset_type: str
    amount: Decimal
    asset_code: Optional[str] = None
    issuer: Optional[str] = None
    liquidity_pool_id: Optional[str] = None

    @property
    def is_native(self) -> bool:
        """Check if this is the XLM balance."""
        return self.asset_type == "native"

    @property
    def label(self) -> str:
        """Asset code, 'XLM' for native, pool id prefix for pool shares."""
        if self.is_native:
            return "XLM"
        if self.asset_code:
            return self.asset_code
        if self.liquidity_pool_id:
            return f"POOL:{self.liquidity_pool_id[:8]}"
        return self.asset_type


@dataclass(frozen=True)
class AccountSnapshot:
    """
    Read-only view of an account as loaded from the ledger.

    Balances keep the order Horizon returned them in.
    """
    account_id: str
    sequence: int
    subentry_count: int
    balances: tuple[BalanceLine, ...] = ()


@dataclass(frozen=True)
class ReserveReport:
    """Locked reserve and spendable XLM for one account."""
    base_reserve: Decimal
    subentry_reserve: Decimal
    total_reserve: Decimal
    available: Decimal

    @property
    def is_underfunded(self) -> bool:
        return self.available < Decimal("0")


@dataclass(frozen=True)
class BalanceClassification:
    native: Optional[BalanceLine]
    trustlines: tuple[BalanceLine, ...]

    @property
    def native_amount(self) -> Decimal:
        """XLM amount, zero when the account has no native entry."""
        return self.native.amount if self.native is not None else Decimal("0")


@dataclass(frozen=True)
class AccountQueryResult:
    """
    Outcome of one account query inside a batch.

    Numeric fields are set only when ``success`` is True, ``error`` and
    ``error_kind`` only when it is False.
    """
    index: int
    account_id: str
    success: bool
    native_amount: Optional[Decimal] = None
    available: Optional[Decimal] = None
    total_reserve: Optional[Decimal] = None
    trustline_count: int = 0
    sequence: Optional[int] = None
    subentry_count: Optional[int] = None
    trustlines: tuple[BalanceLine, ...] = ()
    reserve: Optional[ReserveReport] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def failed(cls, index: int, account_id: str, error: str, error_kind: str) -> "AccountQueryResult":
        return cls(index=index, account_id=account_id, success=False, error=error, error_kind=error_kind)


@dataclass(frozen=True)
class BalanceSummary:
    """Batch totals, summed over successful results only."""
    success_count: int = 0
    failure_count: int = 0
    total_native: Decimal = Decimal("0")
    total_available: Decimal = Decimal("0")
    total_reserve: Decimal = Decimal("0")
    total_trustlines: int = 0

    @property
    def total_count(self) -> int:
        return self.success_count + self.failure_count


@dataclass(frozen=True)
class BalanceBatchResult:
    results: list[AccountQueryResult] = field(default_factory=list)
    summary: BalanceSummary = field(default_factory=BalanceSummary)


@dataclass(frozen=True)
class CreatedAccount:
    """Freshly generated keypair and its Friendbot funding state."""
    index: int
    public_key: str
    secret: str = field(repr=False)
    funded: bool = False
    balance: Decimal = Decimal("0")
    hash: Optional[str] = None
    error: Optional[str] = None
