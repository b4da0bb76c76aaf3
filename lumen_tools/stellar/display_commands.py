# lumen_tools/stellar/display_commands.py
"""Human-readable report lines for batch results."""

from decimal import Decimal
from typing import Sequence

from lumen_tools.constants import AMOUNT_PRECISION
from lumen_tools.domain import (
    AccountQueryResult,
    BalanceSummary,
    CreatedAccount,
    PaymentBatchResult,
    PaymentOutcome,
)
from .address_utils import shorten_address

SEPARATOR = '=' * 60


def format_amount(amount: Decimal) -> str:
    """Render an XLM amount with 7 decimals, e.g. '98.0000000'."""
    return f"{amount.quantize(AMOUNT_PRECISION):f}"


def format_account_result(result: AccountQueryResult, total: int) -> list[str]:
    lines = [SEPARATOR, f"Account {result.index}/{total}: {shorten_address(result.account_id)}"]
    if not result.success:
        lines.append(f"  ERROR [{result.error_kind}]: {result.error}")
        return lines

    lines += [
        f"  XLM balance: {format_amount(result.native_amount)} XLM",
        f"  Available:   {format_amount(result.available)} XLM",
        f"  Locked:      {format_amount(result.total_reserve)} XLM",
        f"  Trustlines:  {result.trustline_count}",
        f"  Sequence:    {result.sequence}",
        f"  Subentries:  {result.subentry_count}",
    ]
    if result.reserve is not None and result.reserve.is_underfunded:
        lines.append("  WARNING: reserve exceeds balance")
    for trustline in result.trustlines:
        issuer = f" (issuer {shorten_address(trustline.issuer)})" if trustline.issuer else ""
        lines.append(f"    {trustline.label}: {trustline.amount:f}{issuer}")
    return lines


def format_balance_summary(summary: BalanceSummary) -> list[str]:
    lines = [
        SEPARATOR,
        "BALANCE SUMMARY",
        f"  Queried:   {summary.total_count}",
        f"  Succeeded: {summary.success_count}",
        f"  Failed:    {summary.failure_count}",
    ]
    if summary.success_count:
        lines += [
            f"  Total XLM:        {format_amount(summary.total_native)} XLM",
            f"  Total available:  {format_amount(summary.total_available)} XLM",
            f"  Total locked:     {format_amount(summary.total_reserve)} XLM",
            f"  Total trustlines: {summary.total_trustlines}",
        ]
    lines.append(SEPARATOR)
    return lines


def format_balance_report(results: Sequence[AccountQueryResult], summary: BalanceSummary) -> list[str]:
    lines = []
    for result in results:
        lines += format_account_result(result, len(results))
    return lines + format_balance_summary(summary)


def format_payment_outcome(outcome: PaymentOutcome) -> list[str]:
    lines = [
        f"Payment {outcome.index}:",
        f"  Destination: {shorten_address(outcome.destination)}",
        f"  Memo: {outcome.memo}",
    ]
    if outcome.success:
        lines += ["  Status: OK", f"  Hash: {outcome.hash}", f"  Ledger: {outcome.ledger}"]
        if outcome.source_balance is not None:
            lines.append(f"  Source balance before: {format_amount(outcome.source_balance)} XLM")
    else:
        lines += ["  Status: FAILED", f"  Error [{outcome.error_kind}]: {outcome.error}"]
    return lines


def format_payment_report(batch: PaymentBatchResult) -> list[str]:
    total = len(batch.results)
    lines = [
        SEPARATOR,
        "PAYMENT SUMMARY",
        f"  Amount per payment: {batch.amount:f} XLM",
        f"  Succeeded: {batch.success_count}/{total}",
        f"  Failed:    {batch.failure_count}/{total}",
        f"  Total sent: {format_amount(batch.total_sent)} XLM",
        SEPARATOR,
    ]
    for outcome in batch.results:
        lines += format_payment_outcome(outcome)
    return lines


def format_created_accounts(accounts: Sequence[CreatedAccount]) -> list[str]:
    lines = [SEPARATOR, "CREATED ACCOUNTS", SEPARATOR]
    for account in accounts:
        lines += [
            f"Account {account.index}:",
            f"  Public key: {account.public_key}",
            f"  Secret key: {account.secret}",
            f"  Balance: {account.balance:f} XLM",
            f"  Status: {'funded' if account.funded else 'not funded'}",
        ]
        if account.hash:
            lines.append(f"  Hash: {account.hash}")
        if account.error:
            lines.append(f"  Error: {account.error}")
    funded = sum(1 for a in accounts if a.funded)
    lines += [
        SEPARATOR,
        f"Funded {funded}/{len(accounts)}",
        "IMPORTANT: store these secret keys somewhere safe",
        SEPARATOR,
    ]
    return lines
