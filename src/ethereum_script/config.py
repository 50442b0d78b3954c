"""
A module for managing resolver configurations.

Classes:
- ResolverConfig: Holds the settings of the forked ledger backend and logging.
"""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ResolverConfig(BaseModel):
    """Settings used when resolving scripted transactions."""

    fork_url: Optional[str] = None
    """JSON-RPC endpoint of the ledger to fork from, if any."""

    fork_block: str = "latest"
    """Block tag or hex number at which forked state is read."""

    rpc_timeout: float = Field(default=30.0, gt=0)
    """Timeout in seconds of each JSON-RPC request."""

    user_agent: str = "ethereum-script-resolver"
    """User agent sent with JSON-RPC requests."""

    log_level: str = "INFO"
    """Level applied to loggers configured through `setup_logger`."""

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """
        Build a configuration from `ETH_RPC_URL`, `FORK_BLOCK_NUMBER` and
        `ETH_RPC_TIMEOUT`, keeping the defaults for unset variables.
        """
        values: Dict[str, Any] = {}
        if "ETH_RPC_URL" in os.environ:
            values["fork_url"] = os.environ["ETH_RPC_URL"]
        if "FORK_BLOCK_NUMBER" in os.environ:
            values["fork_block"] = hex(int(os.environ["FORK_BLOCK_NUMBER"]))
        if "ETH_RPC_TIMEOUT" in os.environ:
            values["rpc_timeout"] = os.environ["ETH_RPC_TIMEOUT"]
        return cls(**values)
