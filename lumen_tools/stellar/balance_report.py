# lumen_tools/stellar/balance_report.py
"""Batch balance queries with per-account reserve reports."""

from decimal import Decimal
from typing import Awaitable, Callable, Sequence

from loguru import logger

from lumen_tools.constants import BALANCE_QUERY_DELAY_MS
from lumen_tools.domain import (
    AccountQueryResult,
    AccountSnapshot,
    BalanceBatchResult,
    BalanceSummary,
)
from lumen_tools.loguru_tools import sleep_ms
from .address_utils import shorten_address
from .exceptions import StellarToolsError
from .reserve_calc import classify_balances, compute_reserve

LoadAccount = Callable[[str], Awaitable[AccountSnapshot]]
Delay = Callable[[int], Awaitable[None]]


def build_query_result(index: int, snapshot: AccountSnapshot) -> AccountQueryResult:
    """Derive reserve, available balance and trustline count from a snapshot."""
    classification = classify_balances(snapshot.balances)
    reserve = compute_reserve(classification.native_amount, snapshot.subentry_count)
    return AccountQueryResult(
        index=index,
        account_id=snapshot.account_id,
        success=True,
        native_amount=classification.native_amount,
        available=reserve.available,
        total_reserve=reserve.total_reserve,
        trustline_count=len(classification.trustlines),
        sequence=snapshot.sequence,
        subentry_count=snapshot.subentry_count,
        trustlines=classification.trustlines,
        reserve=reserve,
    )


async def query_account(index: int, account_id: str, load_account: LoadAccount) -> AccountQueryResult:
    """Load one account; any failure becomes a failed result instead of an exception."""
    try:
        snapshot = await load_account(account_id)
        return build_query_result(index, snapshot)
    except StellarToolsError as ex:
        logger.warning(f"account {shorten_address(account_id)}: {ex.kind}: {ex.message}")
        return AccountQueryResult.failed(index, account_id, ex.message, ex.kind)
    except Exception as ex:
        logger.exception(f"account {shorten_address(account_id)}: unexpected error")
        return AccountQueryResult.failed(index, account_id, f"{type(ex).__name__}: {ex}", type(ex).__name__)


def summarize_balances(results: Sequence[AccountQueryResult]) -> BalanceSummary:
    """Totals over successful results; failures only add to ``failure_count``."""
    succeeded = [r for r in results if r.success]
    return BalanceSummary(
        success_count=len(succeeded),
        failure_count=len(results) - len(succeeded),
        total_native=sum((r.native_amount for r in succeeded), Decimal("0")),
        total_available=sum((r.available for r in succeeded), Decimal("0")),
        total_reserve=sum((r.total_reserve for r in succeeded), Decimal("0")),
        total_trustlines=sum(r.trustline_count for r in succeeded),
    )


async def run_balance_batch(
    account_ids: Sequence[str],
    load_account: LoadAccount,
    delay: Delay = sleep_ms,
) -> BalanceBatchResult:
    """
    Query accounts one by one in input order.

    Exactly one result is produced per identifier. A failed load is
    recorded and the batch moves on. ``delay`` is awaited between
    accounts, whatever the previous outcome, but not after the last one.

    Args:
        account_ids: Stellar public keys
        load_account: Awaitable returning an AccountSnapshot
        delay: Pause primitive taking milliseconds

    Returns:
        BalanceBatchResult with ordered results and totals
    """
    results = []
    total = len(account_ids)
    for index, account_id in enumerate(account_ids, start=1):
        logger.info(f"querying account {index}/{total} {shorten_address(account_id)}")
        results.append(await query_account(index, account_id, load_account))
        if index < total:
            await delay(BALANCE_QUERY_DELAY_MS)

    summary = summarize_balances(results)
    logger.info(f"balance batch done: {summary.success_count} ok, {summary.failure_count} failed")
    return BalanceBatchResult(results=results, summary=summary)
