"""
Protocol Heuristics
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Best-effort guesses about addresses and gas limits seen during simulation.
"""
from ethereum_types.numeric import Uint

from .environment import Environment
from .fork_types import ZERO_ADDRESS, Address

PRECOMPILE_ADDRESS_CEIL = Address(bytes(19) + b"\x0a")

# Value transfers are estimated at the call stipend during simulation.
CALL_STIPEND = Uint(2300)


def is_potential_precompile(address: Address) -> bool:
    """
    Check whether `address` lies in the low range used by precompiled
    contracts, `0x01` to `0x09`.
    """
    return address < PRECOMPILE_ADDRESS_CEIL and address != ZERO_ADDRESS


def check_if_fixed_gas_limit(env: Environment, call_gas_limit: Uint) -> bool:
    """
    Guess whether the gas limit of a call was set explicitly in the script,
    in which case later gas estimations must not override it.

    A call without an explicit limit receives roughly all the gas left,
    which is close to the transaction gas limit configured for the
    simulation. That limit is usually above the block gas limit, so a call
    limit at or below the block gas limit was most likely chosen by hand.

    Parameters
    ----------
    env :
        Environment of the simulation.
    call_gas_limit :
        Gas limit of the call.

    Returns
    -------
    is_fixed : `bool`
        `True` if the gas limit looks explicitly set.
    """
    # TODO: Make this determination reliably, e.g. by recording explicit gas
    # limits while compiling or simulating the script.
    return (
        env.tx.gas_limit > env.block.gas_limit
        and call_gas_limit <= env.block.gas_limit
        and call_gas_limit > CALL_STIPEND
    )
