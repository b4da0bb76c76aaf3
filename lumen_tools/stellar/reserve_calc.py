# lumen_tools/stellar/reserve_calc.py
"""Reserve and available balance calculation."""

from decimal import Decimal
from typing import Iterable, Union

from lumen_tools.constants import BASE_RESERVE, SUBENTRY_RESERVE
from lumen_tools.domain import BalanceClassification, BalanceLine, ReserveReport

AmountLike = Union[Decimal, str, int]


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a ledger amount to Decimal.

    Floats go through str() so 100.1 stays 100.1 and not its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_reserve(native_amount: AmountLike, subentry_count: int) -> ReserveReport:
    """
    Calculate locked reserve and spendable XLM.

    Args:
        native_amount: XLM balance of the account
        subentry_count: Trustlines, offers, extra signers and data entries

    Returns:
        ReserveReport; ``available`` is negative when the reserve exceeds
        the balance and is not clamped
    """
    if subentry_count < 0:
        raise ValueError(f"subentry_count must be non-negative, got {subentry_count}")

    subentry_reserve = SUBENTRY_RESERVE * subentry_count
    total_reserve = BASE_RESERVE + subentry_reserve
    return ReserveReport(
        base_reserve=BASE_RESERVE,
        subentry_reserve=subentry_reserve,
        total_reserve=total_reserve,
        available=to_decimal(native_amount) - total_reserve,
    )


def classify_balances(balances: Iterable[BalanceLine]) -> BalanceClassification:
    """
    Split balances into the native entry and trustlines.

    Trustlines keep input order. Liquidity pool shares count as trustlines.
    """
    native = None
    trustlines = []
    for balance in balances:
        if balance.is_native:
            if native is not None:
                raise ValueError("more than one native balance entry")
            native = balance
        else:
            trustlines.append(balance)
    return BalanceClassification(native=native, trustlines=tuple(trustlines))
