from typing import NamedTuple


class Operation(NamedTuple):
    name: str
    method: str
    path: str
    has_body: bool = False
    has_metadata: bool = True


# Staking API endpoints, one entry per method of the blockdaemon/1.0.0 SDK.
OPERATIONS = (
    Operation("list_customer_plans", "get", "/v1/plans"),
    Operation("list_stake_intents", "get", "/v1/stake-intents"),
    # Ethereum
    Operation("post_ethereum_stake_intent", "post", "/v1/ethereum/{network}/stake-intents", True),
    Operation("exit_ethereum_validator", "post", "/v1/ethereum/{network}/voluntary-exit", True),
    Operation("exit_ethereum_validators", "post", "/v1/ethereum/{network}/voluntary-exits", True),
    Operation("generate_signed_voluntary_exit", "get", "/v1/ethereum/{network}/signed-voluntary-exit"),
    Operation("generate_ethereum_launchpad_deposit", "post", "/v1/eth2-launchpad-deposit", True, False),
    Operation("pending_queued_progress", "post", "/v1/ethereum/{network}/queue-progress/pending-queued", True),
    Operation("active_exiting_queue_progress", "post", "/v1/ethereum/{network}/queue-progress/active-exiting", True),
    # Solana
    Operation("post_solana_stake_intent", "post", "/v1/solana/{network}/stake-intents", True),
    Operation("post_solana_deactivation_intent", "post", "/v1/solana/{network}/deactivation-intents", True),
    Operation("get_solana_deactivation_intents", "get", "/v1/solana/{network}/deactivation-intents"),
    Operation("cancel_solana_deactivation_intent", "put", "/v1/solana/{network}/deactivation-intents", True),
    Operation("get_solana_deactivatable_amount", "get", "/v1/solana/{network}/deactivatable-amount"),
    Operation("post_solana_withdrawal_intent", "post", "/v1/solana/{network}/withdrawal-intents", True),
    Operation("get_solana_withdrawal_intents", "get", "/v1/solana/{network}/withdrawal-intents"),
    Operation("cancel_solana_withdrawal_intent", "put", "/v1/solana/{network}/withdrawal-intents", True),
    Operation("get_solana_withdrawable_amount", "get", "/v1/solana/{network}/withdrawable-amount"),
    Operation("get_stake_accounts_solana", "get", "/v1/solana/{network}/stake-accounts"),
    # Polygon
    Operation("post_polygon_bootstrapping_intent", "post", "/v1/polygon/{network}/bootstrapping-intents", True),
    Operation("post_polygon_stake_intent", "post", "/v1/polygon/{network}/stake-intents", True),
    Operation("post_polygon_deactivation_intent", "post", "/v1/polygon/{network}/deactivation-intents", True),
    Operation("get_polygon_deactivation_intents", "get", "/v1/polygon/{network}/deactivation-intents"),
    Operation("cancel_polygon_deactivation_intent", "put", "/v1/polygon/{network}/deactivation-intents", True),
    Operation("post_polygon_withdrawal_intent", "post", "/v1/polygon/{network}/withdrawal-intents", True),
    Operation("post_polygon_rewards_restake_intent", "post", "/v1/polygon/{network}/rewards/restake-intents", True),
    Operation("post_polygon_rewards_withdrawal_intent", "post", "/v1/polygon/{network}/rewards/withdrawal-intents", True),
    # Polkadot
    Operation("post_polkadot_stake_intent", "post", "/v1/polkadot/{network}/stake-intents", True),
    Operation("post_polkadot_deactivate_intent", "post", "/v1/polkadot/{network}/deactivation-intents", True),
    Operation("post_polkadot_withdrawal_intent", "post", "/v1/polkadot/{network}/withdrawal-intents", True),
    # Cosmos
    Operation("post_cosmos_stake_intent", "post", "/v1/cosmos/{network}/stake-intents", True),
    Operation("post_cosmos_deactivation_intent", "post", "/v1/cosmos/{network}/deactivation-intents", True),
    Operation("get_cosmos_deactivation_intents", "get", "/v1/cosmos/{network}/deactivation-intents"),
    Operation("post_cosmos_rewards_withdrawal_intent", "post", "/v1/cosmos/{network}/rewards/withdrawal-intents", True),
    Operation("get_cosmos_deactivatable_amount", "get", "/v1/cosmos/{network}/deactivatable-amount"),
    Operation("get_cosmos_withdrawable_rewards_amount", "get", "/v1/cosmos/{network}/rewards/withdrawable-amount"),
    Operation("post_cosmos_restake_intent", "post", "/v1/cosmos/{network}/restake-intents", True),
    Operation("get_cosmos_restake_intents", "get", "/v1/cosmos/{network}/restake-intents"),
    # Binance
    Operation("post_binance_stake_intent", "post", "/v1/binance/{network}/stake-intents", True),
    Operation("post_binance_deactivation_intent", "post", "/v1/binance/{network}/deactivation-intents", True),
    Operation("get_binance_deactivation_intents", "get", "/v1/binance/{network}/deactivation-intents"),
    Operation("get_binance_deactivatable_amount", "get", "/v1/binance/{network}/deactivatable-amount"),
    Operation("post_binance_restake_intent", "post", "/v1/binance/{network}/restake-intents", True),
    Operation("get_binance_restake_intents", "get", "/v1/binance/{network}/restake-intents"),
    # Near
    Operation("post_near_stake_intent", "post", "/v1/near/{network}/stake-intents", True),
    Operation("post_near_deactivation_intent", "post", "/v1/near/{network}/deactivation-intents", True),
    Operation("get_near_deactivation_intents", "get", "/v1/near/{network}/deactivation-intents"),
    Operation("cancel_near_deactivation_intent", "put", "/v1/near/{network}/deactivation-intents", True),
    Operation("get_near_deactivatable_amount", "get", "/v1/near/{network}/deactivatable-amount"),
    Operation("post_near_withdrawal_intent", "post", "/v1/near/{network}/withdrawal-intents", True),
    Operation("get_near_withdrawal_intents", "get", "/v1/near/{network}/withdrawal-intents"),
    Operation("get_near_withdrawable_amount", "get", "/v1/near/{network}/withdrawable-amount"),
    # Cardano
    Operation("post_cardano_stake_intent", "post", "/v1/cardano/{network}/stake-intents", True),
    Operation("post_cardano_deactivation_intent", "post", "/v1/cardano/{network}/deactivation-intents", True),
    Operation("get_cardano_deactivation_intents", "get", "/v1/cardano/{network}/deactivation-intents"),
    Operation("post_cardano_rewards_withdrawal_intent", "post", "/v1/cardano/{network}/rewards/withdrawal-intents", True),
    Operation("get_cardano_rewards_withdrawal_intents", "get", "/v1/cardano/{network}/rewards/withdrawal-intents"),
    Operation("submit_transaction", "post", "/v1/cardano/{network}/transaction-submission", True),
    # Avalanche
    Operation("post_avax_stake_intent", "post", "/v1/avalanche/{network}/stake-intents", True),
)
