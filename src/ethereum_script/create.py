"""
Contract Creation
^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Resolution of a contract creation captured during simulation into what has
to be broadcast.

A plain `CREATE` is sent by the broadcasting account itself. A `CREATE2` is
routed through the deterministic deployment proxy at
`DEFAULT_CREATE2_DEPLOYER`, which expects `salt ++ init_code` as calldata and
performs the salted creation on the sender's behalf. Routing through the
proxy gives the same contract address on every ledger the proxy lives on.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U256, Uint

from .backend import Backend
from .exceptions import MissingCreate2Deployer
from .fork_types import Account, Address
from .journal import (
    JournaledState,
    get_account,
    load_account,
    with_journaled_account,
)
from .utils.hexadecimal import hex_to_address

logger = logging.getLogger(__name__)

DEFAULT_CREATE2_DEPLOYER = hex_to_address(
    "0x4e59b44847b379578588920ca78fbf26c0b4956c"
)


@dataclass(frozen=True)
class Create:
    """
    Creation at an address derived from the caller and its nonce.
    """


@dataclass(frozen=True)
class Create2:
    """
    Creation at an address derived from the caller, `salt` and the hash of
    the init code.
    """

    salt: U256


CreateScheme = Union[Create, Create2]


@dataclass
class CreateInputs:
    """
    A contract creation as requested during simulation.
    """

    caller: Address
    scheme: CreateScheme
    init_code: Bytes
    value: U256 = field(default_factory=lambda: U256(0))
    gas_limit: Uint = field(default_factory=lambda: Uint(0))


def _check_create2_deployer(
    journal: JournaledState, backend: Backend
) -> None:
    load_account(journal, DEFAULT_CREATE2_DEPLOYER, backend)
    info = get_account(journal, DEFAULT_CREATE2_DEPLOYER).info

    if info.code is not None:
        if len(info.code) == 0:
            logger.debug("empty CREATE2 deployer code")
            raise MissingCreate2Deployer(DEFAULT_CREATE2_DEPLOYER)
        return

    # Forked state: the code has not been pulled into the journal yet.
    logger.debug("CREATE2 deployer code not loaded, looking up by hash")
    if len(backend.code_by_hash(info.code_hash)) == 0:
        raise MissingCreate2Deployer(DEFAULT_CREATE2_DEPLOYER)


def _increment_nonce(account: Account) -> Uint:
    nonce = account.info.nonce
    account.info.nonce = nonce + Uint(1)
    return nonce


def process_create(
    broadcast_sender: Address,
    bytecode: Bytes,
    journal: JournaledState,
    backend: Backend,
    call: CreateInputs,
) -> Tuple[Bytes, Optional[Address], Uint]:
    """
    Resolve a creation so it can be broadcast by `broadcast_sender`.

    For `Create` the sender issues the creation itself: `call.caller` becomes
    the sender and its nonce is left for the virtual machine to increment.

    For `Create2` the deployment proxy issues the creation: `call.caller`
    becomes the proxy, the init code is prefixed with the 32 byte salt and the
    transaction has to be sent to the proxy. The sender's nonce is still
    consumed by the broadcast, so it is incremented here.

    Parameters
    ----------
    broadcast_sender :
        Account that will sign and send the transaction.
    bytecode :
        Init code of the contract.
    journal :
        Journal of the running simulation.
    backend :
        Backend the journal loads accounts from.
    call :
        The creation being resolved; its `caller` is rewritten.

    Returns
    -------
    data : `Bytes`
        Calldata of the transaction to broadcast.
    to : `Optional[Address]`
        Recipient of the transaction, `None` for a plain creation.
    nonce : `Uint`
        Nonce of `broadcast_sender` to sign the transaction with.
    """
    if isinstance(call.scheme, Create):
        load_account(journal, broadcast_sender, backend)
        call.caller = broadcast_sender
        nonce = get_account(journal, broadcast_sender).info.nonce
        logger.debug(
            "CREATE from 0x%s with nonce %s", broadcast_sender.hex(), nonce
        )
        return bytecode, None, nonce

    salt = call.scheme.salt
    _check_create2_deployer(journal, backend)
    load_account(journal, broadcast_sender, backend)

    call.caller = DEFAULT_CREATE2_DEPLOYER

    # The proxy performs the creation, but the broadcast still consumes a
    # nonce of the sender.
    nonce = with_journaled_account(
        journal, backend, broadcast_sender, _increment_nonce
    )
    logger.debug(
        "CREATE2 via 0x%s from 0x%s with nonce %s",
        DEFAULT_CREATE2_DEPLOYER.hex(),
        broadcast_sender.hex(),
        nonce,
    )

    calldata = salt.to_be_bytes32() + bytecode
    return calldata, DEFAULT_CREATE2_DEPLOYER, nonce
