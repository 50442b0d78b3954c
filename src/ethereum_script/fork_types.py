"""
Ethereum Types
^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Account types shared by the backend, the journal and the resolver.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ethereum_types.bytes import Bytes, Bytes20
from ethereum_types.numeric import U256, Uint

from .crypto.hash import Hash32, keccak256

Address = Bytes20

EMPTY_CODE_HASH = keccak256(b"")
ZERO_ADDRESS = Address(bytes(20))


@dataclass
class AccountInfo:
    """
    Balance, nonce and code of an account as known to a ledger.

    `code` is `None` when the code has not been materialized locally, which
    is the usual situation right after forking a remote ledger. The code is
    then only reachable through `code_hash`.
    """

    balance: U256 = field(default_factory=lambda: U256(0))
    nonce: Uint = field(default_factory=lambda: Uint(0))
    code_hash: Hash32 = EMPTY_CODE_HASH
    code: Optional[Bytes] = None

    @classmethod
    def with_code(
        cls, code: Bytes, balance: U256 = U256(0), nonce: Uint = Uint(0)
    ) -> "AccountInfo":
        """
        Create an account whose code is present and whose code hash matches.
        """
        return cls(
            balance=balance,
            nonce=nonce,
            code_hash=keccak256(code),
            code=Bytes(code),
        )

    def is_empty(self) -> bool:
        """
        An account is empty when it has no balance, no nonce and no code.
        """
        return (
            self.balance == 0
            and self.nonce == 0
            and self.code_hash == EMPTY_CODE_HASH
        )


@dataclass
class Account:
    """
    An account held by the journal.
    """

    info: AccountInfo
    storage: Dict[U256, U256] = field(default_factory=dict)
    is_touched: bool = False
