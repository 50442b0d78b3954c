"""
Private Keys
^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Validation of integers supplied as secp256k1 private keys.
"""

import coincurve
from ethereum_types.numeric import U256

from .exceptions import InvalidKey, InvalidKeyReason

SECP256K1N = U256(
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
)


def parse_private_key(private_key: U256) -> coincurve.PrivateKey:
    """
    Turn `private_key` into a signing key.

    Parameters
    ----------
    private_key :
        Candidate secret scalar.

    Returns
    -------
    signing_key : `coincurve.PrivateKey`
        The key, usable for signing.

    Raises
    ------
    InvalidKey
        If `private_key` is zero, is not below the curve order, or is
        rejected by the signing library.
    """
    if private_key == 0:
        raise InvalidKey(InvalidKeyReason.ZERO, "Private key cannot be 0.")
    if not private_key < SECP256K1N:
        raise InvalidKey(
            InvalidKeyReason.TOO_LARGE,
            "Private key must be less than the secp256k1 curve order "
            f"({int(SECP256K1N)}).",
        )

    try:
        return coincurve.PrivateKey(private_key.to_be_bytes32())
    except ValueError as e:
        raise InvalidKey(InvalidKeyReason.MALFORMED, str(e)) from e
