# lumen_tools/stellar/sdk_utils.py
"""Horizon connection and account loading."""

import asyncio

import aiohttp
from stellar_sdk.client.aiohttp_client import AiohttpClient
from stellar_sdk.exceptions import (
    BadRequestError,
    BaseHorizonError,
    ConnectionError as HorizonConnectionError,
    NotFoundError,
)
from stellar_sdk.server_async import ServerAsync

from lumen_tools.config_reader import StellarConfig
from lumen_tools.domain import AccountSnapshot, BalanceLine
from .exceptions import AccountNotFound, TransportError
from .reserve_calc import to_decimal


def get_server_async(config: StellarConfig) -> ServerAsync:
    """Get asynchronous Stellar Horizon server connection."""
    return ServerAsync(horizon_url=config.horizon_url, client=AiohttpClient())


def describe_horizon_error(ex: BaseHorizonError) -> str:
    extras = ex.extras or {}
    return f"{ex.title}, error {ex.status}, {extras.get('result_codes', 'no extras')}"


def balance_from_horizon(record: dict) -> BalanceLine:
    return BalanceLine(
        asset_type=record['asset_type'],
        amount=to_decimal(record['balance']),
        asset_code=record.get('asset_code'),
        issuer=record.get('asset_issuer'),
        liquidity_pool_id=record.get('liquidity_pool_id'),
    )


def snapshot_from_horizon(record: dict) -> AccountSnapshot:
    """
    Map a Horizon account record to an AccountSnapshot.

    Args:
        record: JSON body of GET /accounts/{id}

    Returns:
        AccountSnapshot with balances in Horizon order
    """
    return AccountSnapshot(
        account_id=record.get('account_id') or record['id'],
        sequence=int(record['sequence']),
        subentry_count=int(record.get('subentry_count', 0)),
        balances=tuple(balance_from_horizon(b) for b in record.get('balances', [])),
    )


async def load_account_snapshot(config: StellarConfig, account_id: str) -> AccountSnapshot:
    """
    Load account from Horizon.

    Raises:
        AccountNotFound: account does not exist or the key is malformed
        TransportError: Horizon unreachable or answered unexpectedly
    """
    try:
        async with get_server_async(config) as server:
            record = await server.accounts().account_id(account_id).call()
    except NotFoundError as ex:
        raise AccountNotFound(account_id) from ex
    except BadRequestError as ex:
        raise AccountNotFound(account_id, describe_horizon_error(ex)) from ex
    except BaseHorizonError as ex:
        raise TransportError(describe_horizon_error(ex)) from ex
    except (HorizonConnectionError, aiohttp.ClientError, asyncio.TimeoutError) as ex:
        raise TransportError(f"horizon unreachable: {ex}") from ex
    return snapshot_from_horizon(record)
