# lumen_tools/stellar/commands.py
"""Command layer: settings in, report lines out."""

from datetime import datetime
from functools import partial
from typing import Awaitable, Callable, Optional

from lumen_tools.config_reader import Settings
from lumen_tools.domain import PaymentRequest
from lumen_tools.loguru_tools import sleep_ms
from .account_factory import fund_with_friendbot, run_account_creation
from .address_utils import validate_public_keys
from .balance_report import LoadAccount, run_balance_batch
from .display_commands import format_balance_report, format_created_accounts, format_payment_report
from .exceptions import ConfigurationError
from .payment_batch import SendOne, parse_amount, run_payment_batch
from .payment_service import get_source_keypair, send_payment_async
from .sdk_utils import load_account_snapshot

Delay = Callable[[int], Awaitable[None]]


async def cmd_check_balances(
    settings: Settings,
    load_account: Optional[LoadAccount] = None,
    delay: Delay = sleep_ms,
) -> list[str]:
    account_ids = validate_public_keys(settings.public_keys)
    if not account_ids:
        raise ConfigurationError("no public keys configured")
    if load_account is None:
        load_account = partial(load_account_snapshot, settings.to_stellar_config())

    header = [
        f"Stellar account monitor: {len(account_ids)} accounts on {settings.horizon_url}",
        "Checked at " + datetime.now().strftime('%d.%m.%Y %H:%M:%S'),
    ]
    batch = await run_balance_batch(account_ids, load_account, delay)
    footer = ["Finished " + datetime.now().strftime('%d.%m.%Y %H:%M:%S')]
    return header + format_balance_report(batch.results, batch.summary) + footer


async def cmd_send_payments(
    settings: Settings,
    send_one: Optional[SendOne] = None,
    delay: Delay = sleep_ms,
) -> list[str]:
    destinations = validate_public_keys(p.destination for p in settings.payments)
    payments = [PaymentRequest(destination=d, memo=p.memo) for d, p in zip(destinations, settings.payments)]
    if not payments:
        raise ConfigurationError("no payments configured")
    amount = parse_amount(settings.payment_amount)
    if send_one is None:
        config = settings.to_stellar_config()
        get_source_keypair(config)
        send_one = partial(send_payment_async, config)

    header = [
        f"Payments to send: {len(payments)}",
        f"Amount per payment: {amount:f} XLM",
        f"Total to send: {amount * len(payments):f} XLM",
    ]
    batch = await run_payment_batch(payments, settings.payment_amount, send_one, delay)
    return header + format_payment_report(batch)


async def cmd_create_accounts(
    settings: Settings,
    fund_account=None,
    delay: Delay = sleep_ms,
    count: Optional[int] = None,
) -> list[str]:
    if fund_account is None:
        fund_account = partial(fund_with_friendbot, settings.to_stellar_config())
    accounts = await run_account_creation(settings.account_count if count is None else count, fund_account, delay)
    return format_created_accounts(accounts)
