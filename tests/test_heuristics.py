import pytest
from ethereum_types.numeric import Uint

from ethereum_script.environment import Environment
from ethereum_script.fork_types import Address
from ethereum_script.heuristics import (
    check_if_fixed_gas_limit,
    is_potential_precompile,
)
from ethereum_script.utils.hexadecimal import hex_to_address

BLOCK_GAS_LIMIT = Uint(30_000_000)


def address_from_int(value: int) -> Address:
    return Address(value.to_bytes(20, "big"))


@pytest.mark.parametrize("value", range(1, 10))
def test_precompile_range(value: int) -> None:
    assert is_potential_precompile(address_from_int(value))


@pytest.mark.parametrize("value", [0, 10, 11, 0x100, 2**159, 2**160 - 1])
def test_not_precompile(value: int) -> None:
    assert not is_potential_precompile(address_from_int(value))


def test_not_precompile_high_byte_set() -> None:
    address = hex_to_address("0x0100000000000000000000000000000000000001")
    assert not is_potential_precompile(address)


def make_env(tx_gas_limit: Uint) -> Environment:
    env = Environment()
    env.block.gas_limit = BLOCK_GAS_LIMIT
    env.tx.gas_limit = tx_gas_limit
    return env


@pytest.mark.parametrize(
    "call_gas_limit,expected",
    [
        (Uint(0), False),
        (Uint(2300), False),
        (Uint(2301), True),
        (Uint(100_000), True),
        (BLOCK_GAS_LIMIT, True),
        (BLOCK_GAS_LIMIT + Uint(1), False),
    ],
)
def test_fixed_gas_limit(call_gas_limit: Uint, expected: bool) -> None:
    env = make_env(Uint(2**63 - 1))
    assert check_if_fixed_gas_limit(env, call_gas_limit) is expected


@pytest.mark.parametrize("tx_gas_limit", [Uint(1_000_000), BLOCK_GAS_LIMIT])
def test_fixed_gas_limit_requires_tx_above_block(tx_gas_limit: Uint) -> None:
    env = make_env(tx_gas_limit)
    assert not check_if_fixed_gas_limit(env, Uint(100_000))
