import logging
import sys
from dataclasses import dataclass
from typing import Callable

from web3.types import TxReceipt

from steak.api import StakingClient
from steak.chain import ChainClient
from steak.config import NetworkSettings, Settings, load_settings, resolve_contract_address
from steak.errors import UnsupportedNetworkError
from steak.log import setup_logging_to_console
from steak.schemas import EthereumStakeIntent, Stake, StakeIntentRequest
from steak.units import format_ether, to_wei

logger = logging.getLogger(__name__)

# One validator deposit.
STAKE_AMOUNT_GWEI = 32 * 10**9

DEVIL_BANNER = "\U0001F608 \U0001F608 \U0001F608"
STEAK_BANNER = "\U0001F969 \U0001F969 \U0001F969"

Confirm = Callable[[str], bool]


@dataclass
class FlowResult:
    sender: str
    balance: int
    test_receipt: TxReceipt | None = None
    intent: EthereumStakeIntent | None = None
    deposit_receipt: TxReceipt | None = None


def console_confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def run(
    settings: Settings,
    confirm: Confirm,
    chain: ChainClient | None = None,
    staking: StakingClient | None = None,
) -> FlowResult:
    network = settings.NETWORK

    # Fails before anything touches the network.
    contract_address = resolve_contract_address(network)
    print(f"\n{DEVIL_BANNER}\n")

    chain = chain or ChainClient.from_settings(settings)
    print(f"Sender Address: {chain.address}\n")

    balance = chain.get_balance()
    print(f"Sender Balance: {format_ether(balance)} ETH\n")
    result = FlowResult(sender=chain.address, balance=balance)

    # Optional test transfer to prove the key and RPC endpoint work
    amount = settings.TEST_TRANSFER_AMOUNT
    receiver = settings.RECEIVER_ADDRESS
    if confirm(f"Send {amount} ETH to the receiver {receiver} on {network} to validate the envs?"):
        print("\nSending to the receiver ...\n")
        result.test_receipt = chain.send_transaction(receiver, to_wei(amount, "ether"))
        print(f"Receipt: {dict(result.test_receipt)}\n")
    else:
        logger.info("Test transfer skipped")

    print(f"\n {STEAK_BANNER} \n")

    staking = (staking or StakingClient.from_settings(settings)).auth(settings.STAKING_API_KEY)

    if not confirm(
        f"Create the unsigned transaction which sends 32 ETH to the contract {contract_address} on {network}?"
    ):
        return result

    print("\nCreating the unsigned transaction ...\n")
    request = StakeIntentRequest(
        stakes=[Stake(amount=str(STAKE_AMOUNT_GWEI), withdrawal_address=chain.address)]
    )
    result.intent = staking.create_stake_intent(request, network).ethereum
    print(f"Intent: {result.intent.model_dump()}\n")

    if result.intent.contract_address.lower() != contract_address.lower():
        logger.warning(
            f"Intent contract {result.intent.contract_address} differs from {contract_address}, "
            f"sending to {contract_address}"
        )

    if not confirm("Sign the unsigned transaction and send the signed one?"):
        return result

    print("\nProcessing ...\n")
    result.deposit_receipt = chain.send_transaction(
        contract_address,
        to_wei(STAKE_AMOUNT_GWEI, "gwei"),
        data=result.intent.unsigned_transaction,
    )
    print(f"Receipt: {dict(result.deposit_receipt)}\n")
    return result


def main():
    try:
        resolve_contract_address(NetworkSettings().NETWORK)

        settings = load_settings()
        setup_logging_to_console(settings.LOG_LEVEL)
        run(settings, console_confirm)
    except UnsupportedNetworkError as e:
        # Unknown network is a no-op, not a failure.
        print(e)
        sys.exit(0)


if __name__ == "__main__":
    main()
