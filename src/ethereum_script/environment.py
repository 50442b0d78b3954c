"""
Execution Environment
^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Items external to the virtual machine, and the projection of a transaction
observed on a ledger into those items so it can be replayed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ethereum_types.bytes import Bytes, Bytes32
from ethereum_types.numeric import U64, U256, Uint

from .fork_types import ZERO_ADDRESS, Address
from .utils.hexadecimal import (
    hex_to_address,
    hex_to_bytes,
    hex_to_bytes32,
    hex_to_u64,
    hex_to_u256,
    hex_to_uint,
)

__all__ = (
    "BlockEnvironment",
    "Environment",
    "ObservedTransaction",
    "TransactCall",
    "TransactCreate",
    "TransactTo",
    "TransactionEnvironment",
    "configure_tx_env",
    "json_to_transaction",
)


@dataclass(frozen=True)
class TransactCall:
    """
    The transaction is a message call to `target`.
    """

    target: Address


@dataclass(frozen=True)
class TransactCreate:
    """
    The transaction creates a contract; the address is derived by the
    virtual machine from the caller and its nonce.
    """


TransactTo = Union[TransactCall, TransactCreate]


@dataclass
class BlockEnvironment:
    """
    Block level items provided by the environment.
    """

    number: Uint = field(default_factory=lambda: Uint(0))
    coinbase: Address = ZERO_ADDRESS
    timestamp: U256 = field(default_factory=lambda: U256(1))
    gas_limit: Uint = field(default_factory=lambda: Uint(30_000_000))
    base_fee_per_gas: U256 = field(default_factory=lambda: U256(0))
    prev_randao: Bytes32 = Bytes32(bytes(32))


@dataclass
class TransactionEnvironment:
    """
    Transaction level items provided by the environment.
    """

    caller: Address = ZERO_ADDRESS
    gas_limit: Uint = field(default_factory=lambda: Uint(30_000_000))
    gas_price: U256 = field(default_factory=lambda: U256(0))
    gas_priority_fee: Optional[U256] = None
    transact_to: TransactTo = field(default_factory=TransactCreate)
    value: U256 = field(default_factory=lambda: U256(0))
    data: Bytes = b""
    nonce: Optional[Uint] = None
    chain_id: Optional[U64] = None
    access_list: List[Tuple[Address, List[U256]]] = field(
        default_factory=list
    )


@dataclass
class Environment:
    """
    Everything the virtual machine reads from outside itself.
    """

    block: BlockEnvironment = field(default_factory=BlockEnvironment)
    tx: TransactionEnvironment = field(default_factory=TransactionEnvironment)


@dataclass
class ObservedTransaction:
    """
    A transaction as reported by a ledger, prior to being replayed.
    """

    sender: Address
    to: Optional[Address]
    gas: Uint
    nonce: Uint
    value: U256 = field(default_factory=lambda: U256(0))
    input: Bytes = b""
    gas_price: Optional[U256] = None
    max_priority_fee_per_gas: Optional[U256] = None
    access_list: Optional[
        Tuple[Tuple[Address, Tuple[Bytes32, ...]], ...]
    ] = None
    chain_id: Optional[U64] = None


def json_to_transaction(t: Dict[str, Any]) -> ObservedTransaction:
    """
    Turn a JSON-RPC transaction object into an `ObservedTransaction`.

    Parameters
    ----------
    t :
        Transaction object as returned by `eth_getTransactionByHash`.

    Returns
    -------
    transaction : `ObservedTransaction`
        The parsed transaction.
    """
    access_list = None
    if t.get("accessList") is not None:
        access_list = tuple(
            (
                hex_to_address(item["address"]),
                tuple(hex_to_bytes32(key) for key in item["storageKeys"]),
            )
            for item in t["accessList"]
        )

    gas_price = t.get("gasPrice")
    priority_fee = t.get("maxPriorityFeePerGas")
    chain_id = t.get("chainId")

    return ObservedTransaction(
        sender=hex_to_address(t["from"]),
        to=hex_to_address(t["to"]) if t.get("to") else None,
        gas=hex_to_uint(t["gas"]),
        nonce=hex_to_uint(t["nonce"]),
        value=hex_to_u256(t.get("value", "0x0")),
        input=hex_to_bytes(t.get("input", "0x")),
        gas_price=hex_to_u256(gas_price) if gas_price is not None else None,
        max_priority_fee_per_gas=(
            hex_to_u256(priority_fee) if priority_fee is not None else None
        ),
        access_list=access_list,
        chain_id=hex_to_u64(chain_id) if chain_id is not None else None,
    )


def configure_tx_env(env: Environment, tx: ObservedTransaction) -> None:
    """
    Configures the transaction environment of `env` so that executing it
    replays `tx`.

    Storage keys of the access list are converted from their 32 byte form to
    `U256`. A missing gas price becomes zero and a missing recipient makes
    the transaction a contract creation. A chain id is only taken over
    when the transaction carries one.

    Parameters
    ----------
    env :
        The environment to update in place.
    tx :
        The transaction to replay.
    """
    env.tx.caller = tx.sender
    env.tx.gas_limit = tx.gas
    env.tx.gas_price = tx.gas_price if tx.gas_price is not None else U256(0)
    env.tx.gas_priority_fee = tx.max_priority_fee_per_gas
    env.tx.nonce = tx.nonce
    if tx.chain_id is not None:
        env.tx.chain_id = tx.chain_id
    env.tx.access_list = [
        (address, [U256.from_be_bytes(key) for key in storage_keys])
        for address, storage_keys in (tx.access_list or ())
    ]
    env.tx.value = tx.value
    env.tx.data = Bytes(tx.input)
    if tx.to is not None:
        env.tx.transact_to = TransactCall(tx.to)
    else:
        env.tx.transact_to = TransactCreate()
