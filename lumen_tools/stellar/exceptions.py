# lumen_tools/stellar/exceptions.py
"""Error taxonomy for ledger collaborators."""


class StellarToolsError(Exception):
    """Base error. ``kind`` is the short label stored in result records."""
    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountNotFound(StellarToolsError):
    """Queried identifier has no account on the ledger."""
    kind = "NotFound"

    def __init__(self, account_id: str, message: str = "account not found"):
        super().__init__(message)
        self.account_id = account_id


class TransportError(StellarToolsError):
    """Network or Horizon service failure."""
    kind = "Transport"


class SubmissionRejected(StellarToolsError):
    """Ledger (or Friendbot) refused the transaction."""
    kind = "SubmissionRejected"


class ConfigurationError(StellarToolsError):
    """Malformed input list, amount or missing credentials."""
    kind = "Configuration"
