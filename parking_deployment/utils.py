import json
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

import yaml
from ape import networks, project
from ape.contracts import ContractContainer
from web3 import Web3

from parking_deployment.constants import LOCAL_NETWORKS
from parking_deployment.exceptions import ContractNotFoundError


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def format_ether(wei: Union[int, str]) -> str:
    """Formats an amount of wei as a decimal ETH string."""
    value = Web3.from_wei(int(wei), "ether")
    return f"{Decimal(value).normalize():f}"


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS


def get_live_network_name() -> Optional[str]:
    """Name of the connected network, or None when it is a local one."""
    if is_local_network():
        return None
    return networks.provider.network.name


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ContractNotFoundError(f"No contract found with name '{contract}'.")


def check_explorer_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the connected network has a block explorer to publish to.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
    if networks.provider.network.explorer is None:
        raise ValueError(
            f"No block explorer configured for network '{networks.provider.network.name}'."
        )
