import unittest
from unittest.mock import MagicMock

from eth_account import Account
from web3 import Web3

from treasury_ops.contracts import load_abi, TreasuryClient, TokenClient
from treasury_ops.errors import TransactionRevertedError

TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

TREASURY = "0x" + "aa" * 20
TOKEN = "0x" + "bb" * 20
ESCROW = "0x" + "cc" * 20


class TestLoadAbi(unittest.TestCase):
    def test_treasury_abi_unwraps_artifact(self):
        abi = load_abi("Treasury")
        names = {entry["name"] for entry in abi}
        self.assertEqual(names, {"withdraw", "balanceOf"})

    def test_erc20_abi_accepts_json_suffix(self):
        abi = load_abi("ERC20.json")
        self.assertEqual(abi[0]["name"], "balanceOf")
        self.assertEqual(abi[0]["stateMutability"], "view")

    def test_unknown_abi_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_abi("DoesNotExist")


class TestTreasuryClient(unittest.TestCase):
    def setUp(self):
        self.w3 = MagicMock()
        self.w3.eth.chain_id = 84532
        self.w3.eth.gas_price = 1_000_000_000
        self.w3.eth.get_transaction_count.return_value = 7
        self.w3.eth.send_raw_transaction.return_value = b"\x12" * 32

        self.account = Account.from_key(TEST_PRIVATE_KEY)
        self.client = TreasuryClient(self.w3, TREASURY, self.account)
        self.contract = self.w3.eth.contract.return_value

        self.contract.functions.withdraw.return_value.build_transaction.return_value = {
            "from": self.account.address,
            "to": Web3.to_checksum_address(TREASURY),
            "data": "0x",
            "value": 0,
            "gas": 90000,
            "gasPrice": 1_000_000_000,
            "nonce": 7,
            "chainId": 84532,
        }

    def test_addresses_are_checksummed(self):
        self.assertEqual(self.client.address, Web3.to_checksum_address(TREASURY))
        _, kwargs = self.w3.eth.contract.call_args
        self.assertEqual(kwargs["address"], Web3.to_checksum_address(TREASURY))

    def test_malformed_address_raises(self):
        with self.assertRaises(ValueError):
            TreasuryClient(self.w3, "0x1234", self.account)

    def test_balance_of_queries_treasury_accounting(self):
        self.contract.functions.balanceOf.return_value.call.return_value = 42

        self.assertEqual(self.client.balance_of(TOKEN), 42)
        self.contract.functions.balanceOf.assert_called_once_with(Web3.to_checksum_address(TOKEN))

    def test_withdraw_signs_and_sends(self):
        tx_hash = self.client.withdraw(TOKEN, ESCROW, 100)

        self.assertEqual(tx_hash, "0x" + "12" * 32)
        self.contract.functions.withdraw.assert_called_once_with(
            Web3.to_checksum_address(TOKEN),
            Web3.to_checksum_address(ESCROW),
            100,
        )
        build_args = self.contract.functions.withdraw.return_value.build_transaction.call_args[0][0]
        self.assertEqual(build_args["from"], self.account.address)
        self.assertEqual(build_args["nonce"], 7)
        self.assertEqual(build_args["chainId"], 84532)
        self.w3.eth.get_transaction_count.assert_called_once_with(self.account.address)
        self.w3.eth.send_raw_transaction.assert_called_once()

    def test_withdraw_without_account_raises(self):
        client = TreasuryClient(self.w3, TREASURY)
        with self.assertRaises(ValueError):
            client.withdraw(TOKEN, ESCROW, 100)
        self.w3.eth.send_raw_transaction.assert_not_called()

    def test_wait_for_receipt_returns_successful_receipt(self):
        receipt = {"status": 1, "blockNumber": 10, "gasUsed": 21000}
        self.w3.eth.wait_for_transaction_receipt.return_value = receipt

        self.assertEqual(self.client.wait_for_receipt("0xabc"), receipt)
        self.w3.eth.wait_for_transaction_receipt.assert_called_once_with("0xabc")

    def test_wait_for_receipt_raises_on_revert(self):
        receipt = {"status": 0, "blockNumber": 10, "gasUsed": 30000}
        self.w3.eth.wait_for_transaction_receipt.return_value = receipt

        with self.assertRaises(TransactionRevertedError) as ctx:
            self.client.wait_for_receipt("0xabc")

        self.assertEqual(ctx.exception.tx_hash, "0xabc")
        self.assertIs(ctx.exception.receipt, receipt)


class TestTokenClient(unittest.TestCase):
    def test_balance_of(self):
        w3 = MagicMock()
        contract = w3.eth.contract.return_value
        contract.functions.balanceOf.return_value.call.return_value = 5_000_000

        client = TokenClient(w3, TOKEN)

        self.assertEqual(client.balance_of(ESCROW), 5_000_000)
        contract.functions.balanceOf.assert_called_once_with(Web3.to_checksum_address(ESCROW))


if __name__ == '__main__':
    unittest.main()
