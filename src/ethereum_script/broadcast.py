"""
Broadcast Queue
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Transactions resolved during simulation, waiting to be signed and sent.
The queue is consumed in insertion order; any other order would break the
nonce sequence of the senders.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U64, U256, Uint

from .backend import Backend
from .create import CreateInputs, process_create
from .environment import ObservedTransaction
from .fork_types import Address
from .journal import JournaledState

logger = logging.getLogger(__name__)


@dataclass
class TransactionRequest:
    """
    An unsigned transaction. `to` is `None` for a contract creation.
    """

    sender: Address
    to: Optional[Address]
    nonce: Uint
    value: U256 = field(default_factory=lambda: U256(0))
    data: Bytes = b""
    gas: Optional[Uint] = None
    chain_id: Optional[U64] = None


@dataclass
class BroadcastableTransaction:
    """
    A transaction together with the RPC endpoint of the ledger it was
    simulated against, if that ledger was a fork.
    """

    rpc: Optional[str]
    transaction: TransactionRequest


BroadcastableTransactions = Deque[BroadcastableTransaction]


def new_broadcast_queue() -> BroadcastableTransactions:
    """
    Create an empty queue.
    """
    return deque()


def queue_create(
    queue: BroadcastableTransactions,
    rpc: Optional[str],
    broadcast_sender: Address,
    journal: JournaledState,
    backend: Backend,
    call: CreateInputs,
    gas: Optional[Uint] = None,
    chain_id: Optional[U64] = None,
) -> TransactionRequest:
    """
    Resolve `call` with `process_create()` and queue the resulting
    transaction. Nothing is queued if resolution fails.

    Parameters
    ----------
    queue :
        Queue to append to.
    rpc :
        Endpoint of the forked ledger, if any.
    broadcast_sender :
        Account sending the transaction.
    journal :
        Journal of the running simulation.
    backend :
        Backend the journal loads accounts from.
    call :
        The creation to resolve.
    gas :
        Explicit gas limit, if one was set.
    chain_id :
        Chain the transaction is meant for, if known.

    Returns
    -------
    transaction : `TransactionRequest`
        The queued transaction.
    """
    data, to, nonce = process_create(
        broadcast_sender, call.init_code, journal, backend, call
    )
    transaction = TransactionRequest(
        sender=broadcast_sender,
        to=to,
        nonce=nonce,
        value=call.value,
        data=data,
        gas=gas,
        chain_id=chain_id,
    )
    queue.append(BroadcastableTransaction(rpc=rpc, transaction=transaction))
    logger.debug("queued creation #%d", len(queue))
    return transaction


def queue_transaction(
    queue: BroadcastableTransactions,
    rpc: Optional[str],
    tx: ObservedTransaction,
) -> TransactionRequest:
    """
    Queue an observed transaction for rebroadcast.
    """
    transaction = TransactionRequest(
        sender=tx.sender,
        to=tx.to,
        nonce=tx.nonce,
        value=tx.value,
        data=tx.input,
        gas=tx.gas,
        chain_id=tx.chain_id,
    )
    queue.append(BroadcastableTransaction(rpc=rpc, transaction=transaction))
    logger.debug("queued transaction #%d", len(queue))
    return transaction
