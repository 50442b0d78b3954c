"""
Error types raised while resolving scripted transactions.
"""
from enum import Enum
from typing import Optional

from ethereum_types.bytes import Bytes20


class EthereumException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class InvalidKeyReason(Enum):
    """
    Why a candidate private key was rejected.
    """

    ZERO = "zero"
    TOO_LARGE = "too large"
    MALFORMED = "malformed"


class InvalidKey(EthereumException):
    """
    Thrown when an integer cannot be used as a secp256k1 private key.
    """

    reason: InvalidKeyReason

    def __init__(self, reason: InvalidKeyReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class DatabaseError(EthereumException):
    """
    Thrown when the ledger backend fails to produce an account or code.
    """


class RpcError(DatabaseError):
    """
    Thrown when a JSON-RPC provider answers with an error object.
    """

    code: Optional[int]

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return super().__str__()
        return f"{super().__str__()} (code {self.code})"


class MissingCreate2Deployer(EthereumException):
    """
    Thrown when a `CREATE2` is requested but the deterministic deployment
    proxy has no code on the target ledger.

    A salted creation against an empty proxy is a call to an empty account:
    it succeeds and returns nothing, so it has to be rejected up front.
    """

    deployer: Bytes20

    def __init__(self, deployer: Bytes20) -> None:
        super().__init__(
            f"missing CREATE2 deployer: no code at 0x{deployer.hex()}"
        )
        self.deployer = deployer
