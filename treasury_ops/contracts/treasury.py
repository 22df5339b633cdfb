import logging
from typing import Any, Optional

from web3 import Web3

from ..errors import TransactionRevertedError
from . import load_abi

logger = logging.getLogger(__name__)


class TreasuryClient:
    """
    Client for the treasury holding contract.
    Reads the treasury's own token accounting and submits admin withdrawals.
    """
    def __init__(self, w3: Web3, address: str, account: Optional[Any] = None):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.account = account

        self.abi = load_abi("Treasury")
        self.contract = self.w3.eth.contract(address=self.address, abi=self.abi)

    def balance_of(self, token_address: str) -> int:
        """
        Returns the treasury's recorded balance of ``token_address``.
        """
        return self.contract.functions.balanceOf(Web3.to_checksum_address(token_address)).call()

    def withdraw(self, token_address: str, to: str, amount: int) -> str:
        """
        Sends ``amount`` of ``token_address`` from the treasury to ``to``.
        Returns the transaction hash; does not wait for inclusion.
        """
        if self.account is None:
            raise ValueError("A signing account is required to withdraw from the treasury.")

        nonce = self.w3.eth.get_transaction_count(self.account.address)

        # Gas is estimated by the node so a revert surfaces before broadcast
        tx = self.contract.functions.withdraw(
            Web3.to_checksum_address(token_address),
            Web3.to_checksum_address(to),
            amount
        ).build_transaction({
            'from': self.account.address,
            'chainId': self.w3.eth.chain_id,
            'gasPrice': self.w3.eth.gas_price,
            'nonce': nonce,
        })

        signed_tx = self.account.sign_transaction(tx)
        logger.debug(f"[TreasuryClient] Sending 'withdraw' from treasury {self.address} to {to}...")
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        return Web3.to_hex(tx_hash)

    def wait_for_receipt(self, tx_hash: str):
        """
        Blocks until ``tx_hash`` is mined, using the client's default timeout.
        Raises TransactionRevertedError if the transaction reverted.
        """
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt["status"] == 0:
            raise TransactionRevertedError(tx_hash, receipt=receipt)
        return receipt
