from unittest.mock import Mock, patch

import pytest

from steak import flow
from steak.errors import InsufficientValidatorsError, UnsupportedNetworkError
from steak.flow import DEVIL_BANNER, STAKE_AMOUNT_GWEI, STEAK_BANNER, console_confirm, run
from steak.schemas import EthereumStakeIntent, StakeIntentResponse
from tests.conftest import HOLESKY_CONTRACT, RECEIVER, SENDER

UNSIGNED_TX = "0x592c0b7d0000000000000000000000000000000000000000000000000000000000000040"


def scripted(*answers):
    """Confirmation responder that replays answers and records the prompts it saw."""
    replies = iter(answers)

    def confirm(prompt):
        confirm.prompts.append(prompt)
        return next(replies)

    confirm.prompts = []
    return confirm


@pytest.fixture
def calls():
    # Shared parent so call order across both clients is recorded in one list
    return Mock()


@pytest.fixture
def chain(calls):
    chain = calls.chain
    chain.address = SENDER
    chain.get_balance.return_value = 15 * 10**17
    chain.send_transaction.return_value = {"status": 1, "transactionHash": "0xaa"}
    return chain


@pytest.fixture
def staking(calls):
    staking = calls.staking
    staking.auth.return_value = staking
    staking.create_stake_intent.return_value = StakeIntentResponse(
        ethereum=EthereumStakeIntent(unsigned_transaction=UNSIGNED_TX, contract_address=HOLESKY_CONTRACT)
    )
    return staking


def call_names(calls):
    return [name for name, _, _ in calls.mock_calls]


def test_decline_everything(settings, chain, staking, capsys):
    confirm = scripted(False, False)

    result = run(settings, confirm, chain=chain, staking=staking)

    out = capsys.readouterr().out
    assert f"Sender Address: {SENDER}" in out
    assert "Sender Balance: 1.5 ETH" in out
    assert "Receipt" not in out
    assert "Intent" not in out
    assert len(confirm.prompts) == 2
    assert confirm.prompts[0] == (
        f"Send 0.000001 ETH to the receiver {RECEIVER} on holesky to validate the envs?"
    )
    assert confirm.prompts[1] == (
        f"Create the unsigned transaction which sends 32 ETH to the contract {HOLESKY_CONTRACT} on holesky?"
    )
    chain.send_transaction.assert_not_called()
    staking.create_stake_intent.assert_not_called()
    assert result.test_receipt is None
    assert result.intent is None


def test_test_transfer_then_stop(settings, chain, staking, capsys):
    result = run(settings, scripted(True, False), chain=chain, staking=staking)

    chain.send_transaction.assert_called_once_with(RECEIVER, 10**12)
    assert result.test_receipt == {"status": 1, "transactionHash": "0xaa"}
    assert "Receipt:" in capsys.readouterr().out
    staking.create_stake_intent.assert_not_called()


def test_skipping_test_transfer_still_reaches_staking(settings, chain, staking):
    result = run(settings, scripted(False, True, True), chain=chain, staking=staking)

    staking.auth.assert_called_once_with("staking-key")
    request, network = staking.create_stake_intent.call_args.args
    assert network == "holesky"
    assert len(request.stakes) == 1
    assert request.stakes[0].amount == "32000000000"
    assert request.stakes[0].withdrawal_address == SENDER

    # Only the deposit goes out, no test transfer
    chain.send_transaction.assert_called_once_with(
        HOLESKY_CONTRACT, 32 * 10**18, data=UNSIGNED_TX
    )
    assert result.intent.unsigned_transaction == UNSIGNED_TX
    assert result.deposit_receipt is not None


def test_decline_sign_and_send(settings, chain, staking, capsys):
    confirm = scripted(False, True, False)

    result = run(settings, confirm, chain=chain, staking=staking)

    assert confirm.prompts[-1] == "Sign the unsigned transaction and send the signed one?"
    assert "Intent:" in capsys.readouterr().out
    chain.send_transaction.assert_not_called()
    assert result.intent is not None
    assert result.deposit_receipt is None


def test_full_run_order(settings, chain, staking, calls):
    run(settings, scripted(True, True, True), chain=chain, staking=staking)

    assert call_names(calls) == [
        "chain.get_balance",
        "chain.send_transaction",
        "staking.auth",
        "staking.create_stake_intent",
        "chain.send_transaction",
    ]


def test_balance_query_precedes_staking_call(settings, chain, staking, calls):
    run(settings, scripted(False, True, False), chain=chain, staking=staking)

    names = call_names(calls)
    assert names.index("chain.get_balance") < names.index("staking.create_stake_intent")


def test_unknown_network_makes_no_calls(make_settings, chain, staking, calls):
    confirm = scripted()

    with pytest.raises(UnsupportedNetworkError):
        run(make_settings(NETWORK="unknown"), confirm, chain=chain, staking=staking)

    assert calls.mock_calls == []
    assert confirm.prompts == []


def test_staking_error_aborts_before_deposit(settings, chain, staking):
    staking.create_stake_intent.side_effect = InsufficientValidatorsError(
        "no validators", status=503, body={"code": 503}
    )

    with pytest.raises(InsufficientValidatorsError):
        run(settings, scripted(False, True, True), chain=chain, staking=staking)

    chain.send_transaction.assert_not_called()


def test_stake_amount_is_one_validator():
    assert STAKE_AMOUNT_GWEI == 32_000_000_000


def test_main_unknown_network_exits_zero(make_settings, monkeypatch, tmp_path, capsys):
    settings = make_settings(NETWORK="unknown")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NETWORK", "unknown")

    with patch.object(flow, "load_settings", return_value=settings), \
            patch.object(flow, "setup_logging_to_console"), \
            patch.object(flow.ChainClient, "from_settings") as chain_factory, \
            patch.object(flow.StakingClient, "from_settings") as staking_factory:
        with pytest.raises(SystemExit) as exc_info:
            flow.main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "Network unknown not supported\n"
    chain_factory.assert_not_called()
    staking_factory.assert_not_called()


def test_main_builds_clients_from_settings(settings, chain, staking, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NETWORK", "holesky")

    with patch.object(flow, "load_settings", return_value=settings), \
            patch.object(flow, "setup_logging_to_console"), \
            patch.object(flow.ChainClient, "from_settings", return_value=chain) as chain_factory, \
            patch.object(flow.StakingClient, "from_settings", return_value=staking) as staking_factory, \
            patch("builtins.input", side_effect=["n", "n"]):
        flow.main()

    chain_factory.assert_called_once_with(settings)
    staking_factory.assert_called_once_with(settings)


def test_main_unknown_network_needs_no_other_variables(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NETWORK", "unknown")
    for name in ("EXECUTION_API_KEY", "STAKING_API_KEY", "PRIVATE_KEY", "RECEIVER_ADDRESS"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SystemExit) as exc_info:
        flow.main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "Network unknown not supported\n"


def test_banners_frame_the_staking_step(settings, chain, staking, capsys):
    run(settings, scripted(False, False), chain=chain, staking=staking)

    out = capsys.readouterr().out
    assert out.index(DEVIL_BANNER) < out.index("Sender Address")
    assert out.index("Sender Balance") < out.index(STEAK_BANNER)


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("Y", True), ("yes", True), (" y ", True), ("", False), ("n", False), ("no", False)],
)
def test_console_confirm(answer, expected):
    with patch("builtins.input", return_value=answer) as mock_input:
        assert console_confirm("Proceed?") is expected

    mock_input.assert_called_once_with("Proceed? [y/N] ")


def test_console_confirm_eof():
    with patch("builtins.input", side_effect=EOFError):
        assert console_confirm("Proceed?") is False
