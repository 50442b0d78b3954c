import pytest
from ethereum_types.numeric import U64, U256, Uint

from ethereum_script.backend import MemoryBackend
from ethereum_script.broadcast import (
    new_broadcast_queue,
    queue_create,
    queue_transaction,
)
from ethereum_script.create import (
    DEFAULT_CREATE2_DEPLOYER,
    Create,
    Create2,
    CreateInputs,
)
from ethereum_script.environment import ObservedTransaction
from ethereum_script.exceptions import MissingCreate2Deployer
from ethereum_script.fork_types import AccountInfo
from ethereum_script.journal import JournaledState
from ethereum_script.utils.hexadecimal import hex_to_address

RPC_URL = "http://localhost:8545"
SENDER = hex_to_address("0x70997970c51812dc3a010c7d01b50e0d17dc79c8")
TARGET = hex_to_address("0x5fbdb2315678afecb367f032d93f642f64180aa3")
INIT_CODE = b"\x60\x80\x60\x40"


def make_backend() -> MemoryBackend:
    backend = MemoryBackend()
    backend.insert_account_info(SENDER, AccountInfo(nonce=Uint(1)))
    backend.insert_account_info(
        DEFAULT_CREATE2_DEPLOYER, AccountInfo.with_code(b"\x60\x00")
    )
    return backend


def test_queue_keeps_resolution_order() -> None:
    backend = make_backend()
    journal = JournaledState()
    queue = new_broadcast_queue()

    queue_create(
        queue,
        RPC_URL,
        SENDER,
        journal,
        backend,
        CreateInputs(SENDER, Create2(U256(1)), INIT_CODE, value=U256(5)),
    )
    queue_transaction(
        queue,
        None,
        ObservedTransaction(
            sender=SENDER,
            to=TARGET,
            gas=Uint(50_000),
            nonce=Uint(2),
            chain_id=U64(10),
        ),
    )
    queue_create(
        queue,
        RPC_URL,
        SENDER,
        journal,
        backend,
        CreateInputs(SENDER, Create(), INIT_CODE),
        gas=Uint(200_000),
        chain_id=U64(1),
    )

    first, second, third = (item.transaction for item in queue)
    assert first.to == DEFAULT_CREATE2_DEPLOYER
    assert first.nonce == 1
    assert first.value == 5
    assert first.data == U256(1).to_be_bytes32() + INIT_CODE
    assert queue[0].rpc == RPC_URL
    assert second.to == TARGET
    assert second.nonce == 2
    assert queue[1].rpc is None
    assert third.to is None
    assert third.nonce == 2
    assert third.data == INIT_CODE
    assert third.gas == 200_000
    assert third.chain_id == 1
    assert second.chain_id == 10
    assert first.chain_id is None

    assert queue.popleft().transaction is first


def test_queue_create_failure_queues_nothing() -> None:
    backend = MemoryBackend()
    queue = new_broadcast_queue()

    with pytest.raises(MissingCreate2Deployer):
        queue_create(
            queue,
            None,
            SENDER,
            JournaledState(),
            backend,
            CreateInputs(SENDER, Create2(U256(0)), INIT_CODE),
        )

    assert len(queue) == 0
