# lumen_tools/stellar/payment_batch.py
"""Sequential native payments to a list of destinations."""

from decimal import Decimal, InvalidOperation
from typing import Awaitable, Callable, Sequence

from loguru import logger

from lumen_tools.constants import AMOUNT_PRECISION, PAYMENT_DELAY_MS
from lumen_tools.domain import PaymentBatchResult, PaymentOutcome, PaymentReceipt, PaymentRequest
from lumen_tools.loguru_tools import sleep_ms
from .address_utils import shorten_address
from .exceptions import ConfigurationError, StellarToolsError

SendOne = Callable[[str, str, str], Awaitable[PaymentReceipt]]
Delay = Callable[[int], Awaitable[None]]


def parse_amount(amount: str) -> Decimal:
    """Validate a payment amount: positive, at most 7 fractional digits."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ConfigurationError(f"invalid payment amount: {amount!r}")
    if not value.is_finite() or value <= 0:
        raise ConfigurationError(f"payment amount must be positive: {amount!r}")
    if value != value.quantize(AMOUNT_PRECISION):
        raise ConfigurationError(f"payment amount has more than 7 decimals: {amount!r}")
    return value


async def send_one_payment(index: int, request: PaymentRequest, amount: str, send_one: SendOne) -> PaymentOutcome:
    try:
        receipt = await send_one(amount, request.destination, request.memo)
    except StellarToolsError as ex:
        logger.warning(f"payment {index} to {shorten_address(request.destination)} failed: {ex.kind}: {ex.message}")
        return PaymentOutcome(index=index, destination=request.destination, memo=request.memo,
                              success=False, error=ex.message, error_kind=ex.kind)
    except Exception as ex:
        logger.exception(f"payment {index} to {shorten_address(request.destination)}: unexpected error")
        return PaymentOutcome(index=index, destination=request.destination, memo=request.memo,
                              success=False, error=f"{type(ex).__name__}: {ex}", error_kind=type(ex).__name__)

    logger.info(f"payment {index} sent, hash {receipt.hash}, ledger {receipt.ledger}")
    return PaymentOutcome(index=index, destination=request.destination, memo=request.memo,
                          success=True, hash=receipt.hash, ledger=receipt.ledger,
                          source_balance=receipt.source_balance)


async def run_payment_batch(
    payments: Sequence[PaymentRequest],
    amount: str,
    send_one: SendOne,
    delay: Delay = sleep_ms,
) -> PaymentBatchResult:
    """
    Send ``amount`` XLM to every destination, one transaction each.

    Payments are independent: a rejected one is recorded and never retried,
    the rest still go out. ``delay`` runs between payments regardless of
    outcome and is skipped after the last.

    Raises:
        ConfigurationError: amount is malformed; raised before anything is sent
    """
    value = parse_amount(amount)
    amount_text = f"{value:f}"
    results = []
    success_count = 0
    total = len(payments)
    for index, request in enumerate(payments, start=1):
        logger.info(f"payment {index}/{total}: {amount_text} XLM to {shorten_address(request.destination)}")
        outcome = await send_one_payment(index, request, amount_text, send_one)
        results.append(outcome)
        if outcome.success:
            success_count += 1
        if index < total:
            await delay(PAYMENT_DELAY_MS)

    logger.info(f"payment batch done: {success_count}/{total} ok")
    return PaymentBatchResult(amount=value, results=results, success_count=success_count)
