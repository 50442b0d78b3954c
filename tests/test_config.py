import logging

import pytest
from pydantic import ValidationError

from ethereum_script.config import ResolverConfig
from ethereum_script.logger import setup_logger


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ETH_RPC_URL", "FORK_BLOCK_NUMBER", "ETH_RPC_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    config = ResolverConfig.from_env()

    assert config.fork_url is None
    assert config.fork_block == "latest"
    assert config.rpc_timeout == 30.0


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ETH_RPC_URL", "http://localhost:8545")
    monkeypatch.setenv("FORK_BLOCK_NUMBER", "17000000")
    monkeypatch.setenv("ETH_RPC_TIMEOUT", "2.5")

    config = ResolverConfig.from_env()

    assert config.fork_url == "http://localhost:8545"
    assert config.fork_block == hex(17000000)
    assert config.rpc_timeout == 2.5


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ResolverConfig(rpc_timeout=0)


def test_setup_logger() -> None:
    config = ResolverConfig(log_level="debug")

    logger = setup_logger("ethereum_script.create", config.log_level)

    assert logger.level == logging.DEBUG
    assert logging.getLogger("ethereum_script").level == logging.INFO
