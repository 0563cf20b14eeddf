from pydantic import BaseModel, ConfigDict


class Stake(BaseModel):
    # Decimal string in gwei, e.g. "32000000000" for one validator.
    amount: str
    withdrawal_address: str


class StakeIntentRequest(BaseModel):
    stakes: list[Stake]


class EthereumStakeIntent(BaseModel):
    model_config = ConfigDict(extra="allow")

    unsigned_transaction: str
    contract_address: str


class StakeIntentResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    ethereum: EthereumStakeIntent
