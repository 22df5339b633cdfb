from dataclasses import dataclass
from enum import Enum
from typing import Optional

from eth_account import Account
from web3 import Web3

from .config import TransferConfig
from .constants import (
    MIN_GAS_RESERVE,
    NATIVE_SYMBOL,
    TOKEN_SYMBOL,
    TOKEN_UNIT,
    TRANSFER_AMOUNT,
)
from .contracts import TokenClient, TreasuryClient
from .errors import error_message, revert_reason
from .logging_config import OperatorLogger, get_logger
from .units import format_units


class TransferStatus(str, Enum):
    COMPLETED = "completed"
    INSUFFICIENT_GAS = "insufficient_gas"
    INSUFFICIENT_TREASURY_BALANCE = "insufficient_treasury_balance"
    FAILED = "failed"


@dataclass
class TransferResult:
    """What happened during one run. Kept in memory only."""

    status: TransferStatus = TransferStatus.FAILED
    signer: Optional[str] = None
    native_balance: Optional[int] = None
    treasury_balance: Optional[int] = None
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    escrow_balance_after: Optional[int] = None
    treasury_balance_after: Optional[int] = None
    error: Optional[str] = None
    reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == TransferStatus.COMPLETED


def _zir(amount: int) -> str:
    return f"{format_units(amount, TOKEN_UNIT)} {TOKEN_SYMBOL}"


class TreasuryTransferOperator:
    """
    Moves a fixed amount of ZIR from the treasury to the escrow address.

    One run submits at most one ``withdraw`` transaction. The run stops early,
    without sending anything, when the signer cannot cover gas or the
    treasury's own accounting shows less than the transfer amount. Any other
    failure is caught once in ``run`` and reported.
    """

    def __init__(
        self,
        config: Optional[TransferConfig] = None,
        w3: Optional[Web3] = None,
        logger: Optional[OperatorLogger] = None,
        env_file: Optional[str] = None,
    ):
        self.config = config
        self.w3 = w3
        self.env_file = env_file
        self.log = logger or get_logger("treasury_ops")

    def run(self) -> TransferResult:
        result = TransferResult()
        log = self.log

        try:
            config = self.config or TransferConfig.from_env(env_file=self.env_file)

            log.log_startup(config.summary())
            log.info("=== Treasury transfer to escrow ===")
            log.info(f"RPC URL: {config.rpc_url}")
            log.info(f"Treasury address: {config.treasury_address}")
            log.info(f"{TOKEN_SYMBOL} token address: {config.token_address}")
            log.info(f"Escrow address: {config.escrow_address}")
            log.info(f"Transfer amount: {_zir(TRANSFER_AMOUNT)}")
            log.info("")

            w3 = self.w3 or Web3(Web3.HTTPProvider(config.rpc_url))
            account = Account.from_key(config.private_key)
            result.signer = account.address
            log.info(f"Using account: {account.address}")

            native_balance = w3.eth.get_balance(account.address)
            result.native_balance = native_balance
            log.info(f"{NATIVE_SYMBOL} balance: {Web3.from_wei(native_balance, 'ether')} {NATIVE_SYMBOL}")

            if native_balance < MIN_GAS_RESERVE:
                log.warning(f"❌ {NATIVE_SYMBOL} balance too low to pay for gas")
                result.status = TransferStatus.INSUFFICIENT_GAS
                return result

            treasury = TreasuryClient(w3, config.treasury_address, account)

            log.info(f"Checking treasury {TOKEN_SYMBOL} balance...")
            treasury_balance = treasury.balance_of(config.token_address)
            result.treasury_balance = treasury_balance
            log.info(f"Treasury {TOKEN_SYMBOL} balance: {_zir(treasury_balance)}")

            if treasury_balance < TRANSFER_AMOUNT:
                log.warning(f"❌ Treasury {TOKEN_SYMBOL} balance is insufficient")
                result.status = TransferStatus.INSUFFICIENT_TREASURY_BALANCE
                return result

            log.info("Submitting transfer...")
            tx_hash = treasury.withdraw(config.token_address, config.escrow_address, TRANSFER_AMOUNT)
            result.tx_hash = tx_hash
            log.log_transaction("submitted", tx_hash)
            log.info(f"Transaction hash: {tx_hash}")
            log.info("Waiting for confirmation...")

            receipt = treasury.wait_for_receipt(tx_hash)
            result.block_number = receipt["blockNumber"]
            result.gas_used = receipt["gasUsed"]
            # The withdrawal has landed; verification below is informational only
            result.status = TransferStatus.COMPLETED
            log.log_transaction("confirmed", tx_hash, {
                "block_number": result.block_number,
                "gas_used": result.gas_used,
            })
            log.info("✅ Transfer succeeded!")
            log.info(f"Block number: {result.block_number}")
            log.info(f"Gas used: {result.gas_used}")

            log.info("")
            log.info("=== Verifying transfer ===")
            token = TokenClient(w3, config.token_address)

            escrow_balance = token.balance_of(config.escrow_address)
            result.escrow_balance_after = escrow_balance
            log.info(f"Escrow {TOKEN_SYMBOL} balance: {_zir(escrow_balance)}")

            remaining = treasury.balance_of(config.token_address)
            result.treasury_balance_after = remaining
            log.info(f"Treasury remaining {TOKEN_SYMBOL}: {_zir(remaining)}")

        except Exception as e:
            result.error = error_message(e)
            result.reason = revert_reason(e)
            if result.status == TransferStatus.COMPLETED:
                log.error(f"⚠️ Transfer confirmed but verification failed: {result.error}")
            else:
                result.status = TransferStatus.FAILED
                log.error(f"❌ Transfer failed: {result.error}")
            if result.reason:
                log.error(f"Reason: {result.reason}")
            log.log_error(e, context={"tx_hash": result.tx_hash, "reason": result.reason}, severity="debug")

        return result
