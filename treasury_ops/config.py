"""
Configuration for the treasury transfer operator.
All values come from the process environment, optionally seeded from a .env file.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import (
    RPC_URL_ENV,
    PRIVATE_KEY_ENV,
    TREASURY_ADDRESS_ENV,
    TOKEN_ADDRESS_ENV,
    ESCROW_ADDRESS_ENV,
)
from .errors import ConfigurationError

ENV_FIELDS = {
    "rpc_url": RPC_URL_ENV,
    "private_key": PRIVATE_KEY_ENV,
    "treasury_address": TREASURY_ADDRESS_ENV,
    "token_address": TOKEN_ADDRESS_ENV,
    "escrow_address": ESCROW_ADDRESS_ENV,
}


@dataclass(frozen=True)
class TransferConfig:
    """
    Settings for one treasury withdrawal run.

    - rpc_url: JSON-RPC endpoint of the network
    - private_key: key with admin rights on the treasury (never logged)
    - treasury_address: treasury holding contract
    - token_address: token being withdrawn
    - escrow_address: destination of the withdrawal
    """

    rpc_url: str
    private_key: str = field(repr=False)
    treasury_address: str
    token_address: str
    escrow_address: str

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None) -> "TransferConfig":
        if env is None:
            if env_file and not os.path.isfile(env_file):
                raise ConfigurationError(message=f"Env file not found: {env_file}")
            # Variables already exported win over the .env file
            load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
            env = os.environ

        values = {name: env.get(var) for name, var in ENV_FIELDS.items()}
        missing = [ENV_FIELDS[name] for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(missing)

        return cls(**values)

    def summary(self) -> Dict[str, Any]:
        """Configuration details safe to print (no private key)."""
        return {
            "rpc_url": self.rpc_url,
            "treasury_address": self.treasury_address,
            "token_address": self.token_address,
            "escrow_address": self.escrow_address,
        }
