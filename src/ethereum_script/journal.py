"""
Journaled State
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

The journal is the per-execution overlay over a backend. It records which
accounts were loaded and which were touched; touched accounts always appear
in the resulting state diff, even when their values did not change.

Access is two-phase: an account is first loaded with `load_account()`, and
only then can it be read with `get_account()` or mutated through
`get_account_mut()`. Reaching for an account that was never loaded is a
sequencing bug in the caller and fails with `AssertionError`.

A journal must only be used by one execution at a time.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, TypeVar

from .backend import Backend
from .fork_types import Account, AccountInfo, Address

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass
class JournaledState:
    """
    Accounts loaded during the current execution, in load order.
    """

    state: Dict[Address, Account] = field(default_factory=dict)


def _ensure_loaded(journal: JournaledState, address: Address) -> Account:
    account = journal.state.get(address)
    if account is None:
        raise AssertionError(f"account 0x{address.hex()} was not loaded")
    return account


def load_account(
    journal: JournaledState, address: Address, backend: Backend
) -> bool:
    """
    Load the account at `address` from `backend` unless it is already in
    the journal. Accounts unknown to the backend are loaded empty.

    Parameters
    ----------
    journal :
        The journal.
    address :
        Address of the account to load.
    backend :
        Where to read the account from.

    Returns
    -------
    is_cold : `bool`
        `True` if the account was read from the backend by this call.
    """
    if address in journal.state:
        return False

    info = backend.load_account(address)
    if info is None:
        info = AccountInfo()
    journal.state[address] = Account(info=info)
    logger.debug("loaded account 0x%s", address.hex())
    return True


def touch(journal: JournaledState, address: Address) -> None:
    """
    Mark a loaded account as touched.
    """
    _ensure_loaded(journal, address).is_touched = True


def get_account(journal: JournaledState, address: Address) -> Account:
    """
    Get a loaded account for reading.

    Parameters
    ----------
    journal :
        The journal.
    address :
        Address of a previously loaded account.

    Returns
    -------
    account : `Account`
        The journaled account. Callers must not modify it; use
        `get_account_mut()` for that.
    """
    return _ensure_loaded(journal, address)


def get_account_mut(journal: JournaledState, address: Address) -> Account:
    """
    Get exclusive, mutable access to a loaded account.
    """
    return _ensure_loaded(journal, address)


def touched_accounts(journal: JournaledState) -> List[Address]:
    """
    Addresses of the touched accounts, in load order.
    """
    return [
        address
        for address, account in journal.state.items()
        if account.is_touched
    ]


def state_diff(journal: JournaledState) -> Dict[Address, AccountInfo]:
    """
    The account information that has to be committed for this execution.
    """
    return {
        address: account.info
        for address, account in journal.state.items()
        if account.is_touched
    }


def with_journaled_account(
    journal: JournaledState,
    backend: Backend,
    address: Address,
    f: Callable[[Account], R],
) -> R:
    """
    Apply `f` to the account at `address`, making sure the account is loaded
    and touched first.

    Parameters
    ----------
    journal :
        The journal.
    backend :
        Where to load the account from if it is not journaled yet.
    address :
        Address of the account.
    f :
        Function receiving the mutable account.

    Returns
    -------
    result :
        Whatever `f` returns.
    """
    load_account(journal, address, backend)
    touch(journal, address)
    return f(get_account_mut(journal, address))
