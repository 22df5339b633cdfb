from typing import Any, Optional

from web3.exceptions import ContractLogicError

REVERT_PREFIX = "execution reverted"


class TreasuryOpsError(Exception):
    """Base class for errors raised by treasury operations."""


class ConfigurationError(TreasuryOpsError, ValueError):
    """Raised when required environment configuration is missing or unreadable."""

    def __init__(self, missing=(), message: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(
            message or "Missing required environment variables: " + ", ".join(self.missing)
        )


class TransactionRevertedError(TreasuryOpsError):
    """Raised when a mined transaction reports status 0."""

    def __init__(self, tx_hash: str, receipt: Any = None, reason: Optional[str] = None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        self.reason = reason
        super().__init__(f"Transaction {tx_hash} reverted")


def revert_reason(error: BaseException) -> Optional[str]:
    """
    Returns the structured revert reason carried by an error, if any.
    """
    reason = getattr(error, "reason", None)
    if reason:
        return str(reason)

    if isinstance(error, ContractLogicError):
        message = getattr(error, "message", None) or (error.args[0] if error.args else None)
        if message:
            reason = str(message)
            if reason.startswith(REVERT_PREFIX):
                reason = reason[len(REVERT_PREFIX):].lstrip(": ")
            return reason or None

    return None


def error_message(error: BaseException) -> str:
    """Human-readable message for an error, preferring web3's ``message`` attribute."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)
