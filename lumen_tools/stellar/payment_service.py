# lumen_tools/stellar/payment_service.py
"""Build, sign and submit native payments."""

import asyncio
from dataclasses import replace

import aiohttp
from loguru import logger
from stellar_sdk import Account, Asset, Keypair, TransactionBuilder
from stellar_sdk.exceptions import (
    BadRequestError,
    BaseHorizonError,
    ConnectionError as HorizonConnectionError,
    NotFoundError,
)

from lumen_tools.config_reader import StellarConfig
from lumen_tools.constants import TRANSACTION_TIMEOUT
from lumen_tools.domain import PaymentReceipt
from .exceptions import ConfigurationError, SubmissionRejected, TransportError
from .reserve_calc import classify_balances
from .sdk_utils import describe_horizon_error, get_server_async, snapshot_from_horizon


def get_source_keypair(config: StellarConfig) -> Keypair:
    if not config.secret_key:
        raise ConfigurationError("secret key is not configured")
    try:
        return Keypair.from_secret(config.secret_key)
    except ValueError as ex:
        raise ConfigurationError(f"invalid secret key: {ex}") from ex


def receipt_from_response(response: dict) -> PaymentReceipt:
    """
    Accept only responses that explicitly report success.

    Raises:
        SubmissionRejected: ``successful`` missing or false, or no hash
    """
    if response.get('successful') is not True or not response.get('hash'):
        raise SubmissionRejected(f"transaction not confirmed as successful: {response.get('result_xdr', response)}")
    return PaymentReceipt(hash=response['hash'], ledger=int(response.get('ledger', 0)))


async def send_payment_async(
    config: StellarConfig,
    amount: str,
    destination: str,
    memo_text: str = "",
) -> PaymentReceipt:
    """
    Builds, signs and submits a native payment transaction.

    Each call loads the source account again so every payment consumes a
    fresh sequence number.

    Args:
        config: Horizon endpoint, passphrase, fee and signing secret
        amount: XLM amount as decimal string
        destination: Destination public key
        memo_text: Text memo, up to 28 bytes; empty means no memo

    Returns:
        PaymentReceipt with transaction hash, ledger and the source
        XLM balance seen before submitting
    """
    keypair = get_source_keypair(config)
    try:
        async with get_server_async(config) as server:
            record = await server.accounts().account_id(keypair.public_key).call()
            snapshot = snapshot_from_horizon(record)
            source_balance = classify_balances(snapshot.balances).native_amount
            logger.info(f"source balance {source_balance:f} XLM, sequence {snapshot.sequence}")
            source_account = Account(keypair.public_key, snapshot.sequence)

            builder = TransactionBuilder(
                source_account=source_account,
                network_passphrase=config.network_passphrase,
                base_fee=config.base_fee,
            )
            builder.set_timeout(TRANSACTION_TIMEOUT)
            if memo_text:
                builder.add_text_memo(memo_text)
            builder.append_payment_op(
                destination=destination,
                asset=Asset.native(),
                amount=str(amount),
            )
            transaction = builder.build()
            transaction.sign(keypair)
            response = await server.submit_transaction(transaction)
    except (BadRequestError, NotFoundError) as ex:
        raise SubmissionRejected(describe_horizon_error(ex)) from ex
    except BaseHorizonError as ex:
        raise TransportError(describe_horizon_error(ex)) from ex
    except (HorizonConnectionError, aiohttp.ClientError, asyncio.TimeoutError) as ex:
        raise TransportError(f"horizon unreachable: {ex}") from ex
    except ValueError as ex:
        # bad destination key, memo over 28 bytes, malformed amount
        raise SubmissionRejected(str(ex)) from ex

    receipt = receipt_from_response(response)
    return replace(receipt, source_balance=source_balance)
