"""
Utility Functions For Addresses
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Prediction of the addresses produced by `CREATE` and `CREATE2`, so callers
can tell where a resolved creation will land once broadcast.
"""
from ethereum_rlp import rlp
from ethereum_types.bytes import Bytes, Bytes32
from ethereum_types.numeric import U256, Uint

from ..crypto.hash import keccak256
from ..fork_types import Address


def compute_contract_address(address: Address, nonce: Uint) -> Address:
    """
    Computes address of the new account that needs to be created.

    Parameters
    ----------
    address :
        The address of the account that wants to create the new account.
    nonce :
        The transaction count of the account that wants to create the new
        account.

    Returns
    -------
    address: `Address`
        The computed address of the new account.
    """
    computed_address = keccak256(rlp.encode([address, nonce]))
    return Address(computed_address[-20:])


def compute_create2_contract_address(
    address: Address, salt: U256, call_data: Bytes
) -> Address:
    """
    Computes address of the new account that needs to be created, which is
    based on the sender address, salt and the call data as well.

    Parameters
    ----------
    address :
        The address of the account that issues the `CREATE2`. For scripted
        deployments this is the deterministic deployment proxy.
    salt :
        Address generation salt.
    call_data :
        The code of the new account which is to be created.

    Returns
    -------
    address: `Address`
        The computed address of the new account.
    """
    salt_bytes: Bytes32 = salt.to_be_bytes32()
    preimage = b"\xff" + address + salt_bytes + keccak256(call_data)
    computed_address = keccak256(preimage)
    return Address(computed_address[-20:])
