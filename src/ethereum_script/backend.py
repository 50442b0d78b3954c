"""
Ledger Backends
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A backend is the source the journal loads accounts from. Two are provided:
`MemoryBackend`, which holds a complete ledger in memory, and `RpcBackend`,
which forks a remote ledger by fetching accounts lazily over JSON-RPC.
"""

import logging
from dataclasses import replace
from itertools import count
from typing import Any, Dict, Optional, Protocol

import requests
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U64

from .config import ResolverConfig
from .crypto.hash import Hash32, keccak256
from .environment import ObservedTransaction, json_to_transaction
from .exceptions import DatabaseError, RpcError
from .fork_types import EMPTY_CODE_HASH, AccountInfo, Address
from .utils.hexadecimal import (
    hex_to_bytes,
    hex_to_u64,
    hex_to_u256,
    hex_to_uint,
)

logger = logging.getLogger(__name__)


class Backend(Protocol):
    """
    Source of accounts and code for the journal.
    """

    def load_account(self, address: Address) -> Optional[AccountInfo]:
        """
        Get the account at `address`, or `None` if it does not exist.

        Raises `DatabaseError` if the ledger cannot be read.
        """
        ...

    def code_by_hash(self, code_hash: Hash32) -> Bytes:
        """
        Get the code whose hash is `code_hash`. Unknown code is empty.

        Raises `DatabaseError` if the ledger cannot be read.
        """
        ...


class MemoryBackend:
    """
    A ledger held entirely in memory.
    """

    accounts: Dict[Address, AccountInfo]
    contracts: Dict[Hash32, Bytes]

    def __init__(self) -> None:
        self.accounts = {}
        self.contracts = {EMPTY_CODE_HASH: b""}

    def insert_account_info(self, address: Address, info: AccountInfo) -> None:
        """
        Store `info` at `address`. Code carried by `info` is also made
        available by hash.
        """
        if info.code is not None:
            self.contracts[info.code_hash] = info.code
        self.accounts[address] = info

    def insert_contract(self, code: Bytes) -> Hash32:
        """
        Make `code` available by hash without attaching it to an account.
        """
        code_hash = keccak256(code)
        self.contracts[code_hash] = code
        return code_hash

    def load_account(self, address: Address) -> Optional[AccountInfo]:
        """
        Return a copy of the account at `address`.
        """
        info = self.accounts.get(address)
        if info is None:
            return None
        return replace(info)

    def code_by_hash(self, code_hash: Hash32) -> Bytes:
        """
        Return the code stored for `code_hash`, empty if unknown.
        """
        return self.contracts.get(code_hash, b"")


class RpcBackend:
    """
    A ledger forked from a JSON-RPC provider.

    Accounts are fetched on first use at a fixed block and cached. Their code
    is kept apart from the account and served through `code_by_hash`, the way
    a freshly forked state behaves before any code is materialized.
    """

    url: str
    block: str
    timeout: float
    user_agent: str

    def __init__(
        self,
        url: str,
        block: str = "latest",
        timeout: float = 30.0,
        user_agent: str = "ethereum-script-resolver",
    ) -> None:
        self.url = url
        self.block = block
        self.timeout = timeout
        self.user_agent = user_agent
        self.request_id_counter = count(1)
        self.accounts: Dict[Address, Optional[AccountInfo]] = {}
        self.contracts: Dict[Hash32, Bytes] = {EMPTY_CODE_HASH: b""}

    @classmethod
    def from_config(cls, config: ResolverConfig) -> "RpcBackend":
        """
        Create a backend for the ledger configured by `config.fork_url`.
        """
        if config.fork_url is None:
            raise ValueError("no fork url configured")
        return cls(
            config.fork_url,
            block=config.fork_block,
            timeout=config.rpc_timeout,
            user_agent=config.user_agent,
        )

    def post_request(self, method: str, *params: Any) -> Any:
        """
        Send a JSON-RPC request and return its `result`.
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(self.request_id_counter),
        }
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        logger.debug("rpc %s%r -> %s", method, params, self.url)

        try:
            response = requests.post(
                self.url, json=payload, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            reply = response.json()
        except (requests.RequestException, ValueError) as e:
            raise DatabaseError(f"{method} failed: {e}") from e

        if not isinstance(reply, dict):
            raise DatabaseError(f"{method} reply is not a JSON-RPC object")
        if "error" in reply:
            error = reply["error"]
            if not isinstance(error, dict):
                raise RpcError(str(error))
            raise RpcError(error.get("message", str(error)), error.get("code"))
        if "result" not in reply:
            raise DatabaseError(f"{method} reply without result")
        return reply["result"]

    def load_account(self, address: Address) -> Optional[AccountInfo]:
        """
        Fetch balance, nonce and code of `address` at the forked block.
        Accounts without balance, nonce or code are reported as missing.
        """
        if address not in self.accounts:
            hex_address = "0x" + address.hex()
            balance = hex_to_u256(
                self.post_request("eth_getBalance", hex_address, self.block)
            )
            nonce = hex_to_uint(
                self.post_request(
                    "eth_getTransactionCount", hex_address, self.block
                )
            )
            code = hex_to_bytes(
                self.post_request("eth_getCode", hex_address, self.block)
            )
            code_hash = keccak256(code)
            self.contracts[code_hash] = code

            info = AccountInfo(
                balance=balance, nonce=nonce, code_hash=code_hash
            )
            self.accounts[address] = None if info.is_empty() else info

        cached = self.accounts[address]
        return replace(cached) if cached is not None else None

    def code_by_hash(self, code_hash: Hash32) -> Bytes:
        """
        Return code fetched alongside an account, empty if never seen.
        """
        return self.contracts.get(code_hash, b"")

    def fetch_transaction(self, tx_hash: Hash32) -> ObservedTransaction:
        """
        Fetch a mined or pending transaction so it can be replayed.
        """
        result = self.post_request(
            "eth_getTransactionByHash", "0x" + tx_hash.hex()
        )
        if result is None:
            raise DatabaseError(f"unknown transaction 0x{tx_hash.hex()}")
        return json_to_transaction(result)

    def fetch_chain_id(self) -> U64:
        """
        Fetch the chain id of the forked ledger.
        """
        return hex_to_u64(self.post_request("eth_chainId"))
