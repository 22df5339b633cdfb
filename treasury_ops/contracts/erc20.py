from web3 import Web3

from . import load_abi


class TokenClient:
    """Read-only view of an ERC-20 token."""

    def __init__(self, w3: Web3, address: str):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.abi = load_abi("ERC20")
        self.contract = self.w3.eth.contract(address=self.address, abi=self.abi)

    def balance_of(self, account: str) -> int:
        return self.contract.functions.balanceOf(Web3.to_checksum_address(account)).call()
