import os
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from stellar_sdk import Network

from lumen_tools.constants import FRIENDBOT_URL, TESTNET_HORIZON_URL

start_path = os.path.dirname(os.path.dirname(__file__)) + '/'
dotenv_path = os.path.join(start_path, '.env')


class PaymentTarget(BaseModel):
    destination: str
    memo: str = ""


class Settings(BaseSettings):
    horizon_url: str = TESTNET_HORIZON_URL
    stellar_testnet: bool = True
    secret_key: SecretStr | None = None
    base_fee: int = 100
    friendbot_url: str = FRIENDBOT_URL

    # Batch inputs, JSON encoded in the environment
    public_keys: list[str] = []
    payments: list[PaymentTarget] = []
    payment_amount: str = "2"
    account_count: int = 5

    log_file: str = "logs/lumen_tools.log"
    log_level: str = "INFO"
    sentry_dsn: str | None = None

    model_config = SettingsConfigDict(
        env_file=dotenv_path,
        env_file_encoding='utf-8',
        extra='allow',
        case_sensitive=False
    )

    @property
    def network_passphrase(self) -> str:
        if self.stellar_testnet:
            return Network.TESTNET_NETWORK_PASSPHRASE
        return Network.PUBLIC_NETWORK_PASSPHRASE

    def to_stellar_config(self) -> "StellarConfig":
        return StellarConfig(
            horizon_url=self.horizon_url,
            network_passphrase=self.network_passphrase,
            secret_key=self.secret_key.get_secret_value() if self.secret_key else None,
            base_fee=self.base_fee,
            friendbot_url=self.friendbot_url,
        )


@dataclass(frozen=True)
class StellarConfig:
    """Connection and signing parameters handed to the SDK adapters."""
    horizon_url: str = TESTNET_HORIZON_URL
    network_passphrase: str = Network.TESTNET_NETWORK_PASSPHRASE
    secret_key: Optional[str] = field(default=None, repr=False)
    base_fee: int = 100
    friendbot_url: str = FRIENDBOT_URL


def load_settings(**overrides) -> Settings:
    """Read settings from the environment and .env; keyword overrides win."""
    return Settings(**overrides)  # type: ignore[call-arg]
