# lumen_tools/stellar/account_factory.py
"""Test account generation and Friendbot funding."""

import asyncio
from typing import Awaitable, Callable, Optional

import aiohttp
from loguru import logger
from stellar_sdk import Keypair

from lumen_tools.config_reader import StellarConfig
from lumen_tools.constants import ACCOUNT_CREATION_DELAY_MS, FRIENDBOT_STARTING_BALANCE
from lumen_tools.domain import CreatedAccount, PaymentReceipt
from lumen_tools.loguru_tools import sleep_ms
from lumen_tools.web_tools import HTTPSessionManager, WebResponse
from .address_utils import shorten_address
from .exceptions import StellarToolsError, SubmissionRejected, TransportError

FundAccount = Callable[[str], Awaitable[PaymentReceipt]]
Delay = Callable[[int], Awaitable[None]]


def generate_keypair() -> Keypair:
    return Keypair.random()


def receipt_from_friendbot(response: WebResponse) -> PaymentReceipt:
    """
    Friendbot answers with the funding transaction.

    An HTTP 200 alone is not enough: the body must carry
    ``successful: true`` and a hash. 5xx answers, often HTML from a
    proxy, are transport failures.
    """
    data = response.data if isinstance(response.data, dict) else {}
    if response.status >= 500:
        raise TransportError(f"friendbot unavailable (HTTP {response.status}): {str(response.data)[:200]}")
    if data.get('successful') is True and data.get('hash'):
        return PaymentReceipt(hash=data['hash'], ledger=int(data.get('ledger', 0)))
    detail = data.get('detail') or data.get('title') or str(response.data)[:200]
    raise SubmissionRejected(f"friendbot refused funding (HTTP {response.status}): {detail}")


async def fund_with_friendbot(
    config: StellarConfig,
    public_key: str,
    session_manager: Optional[HTTPSessionManager] = None,
) -> PaymentReceipt:
    """
    Ask Friendbot to create and fund ``public_key`` on testnet.

    Raises:
        SubmissionRejected: Friendbot did not confirm success
        TransportError: Friendbot unreachable or answering 5xx
    """
    own_manager = session_manager is None
    if own_manager:
        session_manager = HTTPSessionManager()
    try:
        response = await session_manager.get_web_request(
            'GET', url=config.friendbot_url, params={'addr': public_key}
        )
    except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
        raise TransportError(f"friendbot unreachable: {ex}") from ex
    except ValueError as ex:
        # JSON content type with an undecodable body
        raise TransportError(f"friendbot sent malformed response: {ex}") from ex
    finally:
        if own_manager:
            await session_manager.close()
    return receipt_from_friendbot(response)


async def create_account(index: int, fund_account: FundAccount,
                         generate: Callable[[], Keypair] = generate_keypair) -> CreatedAccount:
    keypair = generate()
    try:
        receipt = await fund_account(keypair.public_key)
    except StellarToolsError as ex:
        logger.warning(f"account {index} {shorten_address(keypair.public_key)} not funded: {ex.message}")
        return CreatedAccount(index=index, public_key=keypair.public_key, secret=keypair.secret, error=ex.message)
    except Exception as ex:
        logger.exception(f"account {index}: unexpected funding error")
        return CreatedAccount(index=index, public_key=keypair.public_key, secret=keypair.secret,
                              error=f"{type(ex).__name__}: {ex}")

    logger.info(f"account {index} {shorten_address(keypair.public_key)} funded, hash {receipt.hash}")
    return CreatedAccount(index=index, public_key=keypair.public_key, secret=keypair.secret, funded=True,
                          balance=FRIENDBOT_STARTING_BALANCE, hash=receipt.hash)


async def run_account_creation(
    count: int,
    fund_account: FundAccount,
    delay: Delay = sleep_ms,
    generate: Callable[[], Keypair] = generate_keypair,
) -> list[CreatedAccount]:
    """
    Generate ``count`` keypairs and fund each one in turn.

    Unfunded accounts are still returned so their keys are not lost.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    accounts = []
    for index in range(1, count + 1):
        logger.info(f"creating account {index}/{count}")
        accounts.append(await create_account(index, fund_account, generate))
        if index < count:
            await delay(ACCOUNT_CREATION_DELAY_MS)
    return accounts
