from .config import TransferConfig
from .transfer import TreasuryTransferOperator, TransferResult, TransferStatus
from .contracts import load_abi, TreasuryClient, TokenClient
from .units import format_units, parse_units

__all__ = [
    "TransferConfig",
    "TreasuryTransferOperator",
    "TransferResult",
    "TransferStatus",
    "load_abi",
    "TreasuryClient",
    "TokenClient",
    "format_units",
    "parse_units",
]
