import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from parking_deployment.constants import (
    DEFAULT_NETWORK,
    DEFAULT_TOKEN_INITIAL_PRICE,
    DEFAULT_TOKEN_NAME,
    DEFAULT_TOKEN_SYMBOL,
    NETWORK_ENVVAR,
    TOKEN_INITIAL_PRICE_ENVVAR,
    TOKEN_NAME_ENVVAR,
    TOKEN_SYMBOL_ENVVAR,
)
from parking_deployment.exceptions import ConfigurationError
from parking_deployment.utils import _load_yaml


def _parse_price(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Token initial price must be an integer, got {value!r}.")
    try:
        price = int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"Token initial price must be an integer, got {value!r}.")
    if price < 0:
        raise ConfigurationError(f"Token initial price cannot be negative, got {price}.")
    return price


def _load_params(params_filepath: Optional[Path]) -> Dict[str, Any]:
    """Flattens a constructor parameters YAML file into config field names."""
    if params_filepath is None:
        return dict()

    config = _load_yaml(Path(params_filepath)) or dict()
    if not isinstance(config, dict):
        raise ConfigurationError(f"Malformed parameters file {params_filepath}.")

    token = config.get("token") or dict()
    if not isinstance(token, dict):
        raise ConfigurationError(f"Malformed 'token' section in {params_filepath}.")

    params = {
        "network": config.get("network"),
        "token_name": token.get("name"),
        "token_symbol": token.get("symbol"),
        "token_initial_price": token.get("initial_price"),
    }
    return {name: value for name, value in params.items() if value is not None}


class DeploymentConfig(NamedTuple):
    """Explicit deployment configuration passed into the deployer."""

    network: str = DEFAULT_NETWORK
    token_name: str = DEFAULT_TOKEN_NAME
    token_symbol: str = DEFAULT_TOKEN_SYMBOL
    token_initial_price: int = DEFAULT_TOKEN_INITIAL_PRICE

    @classmethod
    def build(
        cls,
        network: Optional[str] = None,
        token_name: Optional[str] = None,
        token_symbol: Optional[str] = None,
        token_initial_price: Optional[Any] = None,
        params_filepath: Optional[Path] = None,
        default_network: Optional[str] = None,
    ) -> "DeploymentConfig":
        """
        Builds a config where explicit values take precedence over
        the parameters file, which takes precedence over the defaults.

        default_network replaces the built-in network name when neither
        an explicit value nor the parameters file provides one.
        """
        values = _load_params(params_filepath)
        explicit = {
            "network": network,
            "token_name": token_name,
            "token_symbol": token_symbol,
            "token_initial_price": token_initial_price,
        }
        values.update({name: value for name, value in explicit.items() if value is not None})
        if default_network is not None:
            values.setdefault("network", default_network)

        if "token_initial_price" in values:
            values["token_initial_price"] = _parse_price(values["token_initial_price"])
        return cls(**values)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, params_filepath: Optional[Path] = None
    ) -> "DeploymentConfig":
        """Builds a config from the PARKING_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls.build(
            network=environ.get(NETWORK_ENVVAR) or None,
            token_name=environ.get(TOKEN_NAME_ENVVAR) or None,
            token_symbol=environ.get(TOKEN_SYMBOL_ENVVAR) or None,
            token_initial_price=environ.get(TOKEN_INITIAL_PRICE_ENVVAR) or None,
            params_filepath=params_filepath,
        )

    @property
    def token_constructor_args(self) -> List[str]:
        """ParkingToken constructor arguments as stored in the record."""
        return [self.token_name, self.token_symbol, str(self.token_initial_price)]
