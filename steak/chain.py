import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.types import TxParams, TxReceipt

from steak.config import Settings

logger = logging.getLogger(__name__)


def derive_account(private_key: str) -> LocalAccount:
    # Raises on non-hex or wrong-length keys.
    return Account.from_key(private_key)


class ChainClient:
    """
    Thin adapter over a Web3 instance and one local signing account.
    Every call blocks until the node answers.
    """

    def __init__(self, w3: Web3, private_key: str):
        self.w3 = w3
        self.account = derive_account(private_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChainClient":
        w3 = Web3(Web3.HTTPProvider(settings.execution_rpc_url))
        return cls(w3, settings.PRIVATE_KEY)

    @property
    def address(self) -> str:
        return self.account.address

    def get_balance(self, address: str | None = None) -> int:
        address = address or self.address
        balance = self.w3.eth.get_balance(Web3.to_checksum_address(address))
        logger.debug(f"Balance of {address}: {balance} wei")
        return balance

    def build_transaction(self, to: str, value: int, data: str | bytes | None = None) -> TxParams:
        tx: TxParams = {
            "from": self.address,
            "to": Web3.to_checksum_address(to),
            "value": value,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "chainId": self.w3.eth.chain_id,
        }
        if data:
            tx["data"] = HexBytes(data)

        tx["gas"] = self.w3.eth.estimate_gas(tx)

        # Same fee strategy web3 uses when it fills a transaction itself.
        priority_fee = self.w3.eth.max_priority_fee
        base_fee = self.w3.eth.get_block("latest")["baseFeePerGas"]
        tx["maxPriorityFeePerGas"] = priority_fee
        tx["maxFeePerGas"] = priority_fee + 2 * base_fee
        return tx

    def send_transaction(self, to: str, value: int, data: str | bytes | None = None) -> TxReceipt:
        tx = self.build_transaction(to, value, data)
        signed_tx = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.info(f"Broadcast transaction {tx_hash.hex()} to {to}, waiting for receipt")
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        logger.info(f"Transaction {tx_hash.hex()} mined in block {receipt['blockNumber']}")
        return receipt
