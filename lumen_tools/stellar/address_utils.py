# lumen_tools/stellar/address_utils.py
"""Public key validation and display helpers."""

from typing import Iterable

from stellar_sdk import StrKey

from .exceptions import ConfigurationError


def is_valid_public_key(address: str) -> bool:
    """Check strkey format and checksum."""
    return StrKey.is_valid_ed25519_public_key(address)


def validate_public_keys(addresses: Iterable[str]) -> list[str]:
    """
    Strip and check a list of public keys.

    Raises:
        ConfigurationError: on the first malformed key
    """
    result = []
    for position, address in enumerate(addresses, start=1):
        address = address.strip()
        if not is_valid_public_key(address):
            raise ConfigurationError(f"invalid public key at position {position}: {address!r}")
        result.append(address)
    return result


def shorten_address(address: str) -> str:
    """
    Return shortened version of Stellar address.

    Args:
        address: Full Stellar public key

    Returns:
        Shortened address like 'GABC..XY7V'
    """
    if not address or len(address) < 10:
        return address
    return f"{address[:4]}..{address[-4:]}"
