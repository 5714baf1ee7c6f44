import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pytest
from eth_utils import to_checksum_address
from web3 import Web3

from parking_deployment.client import DeploymentClient
from parking_deployment.config import DeploymentConfig
from parking_deployment.records import ContractDeployment, DeploymentRecord

CHAIN_ID = 31337


def contract_address(index: int) -> str:
    return to_checksum_address(f"0x{index + 0xC0FFEE:040x}")


class ScriptedDeploymentClient(DeploymentClient):
    """Hands out sequential addresses and fails on request."""

    def __init__(
        self,
        deployer: str,
        fail_on: Optional[str] = None,
        chain_id: int = CHAIN_ID,
        balance: int = Web3.to_wei(10_000, "ether"),
    ):
        self._deployer = to_checksum_address(deployer)
        self._chain_id = chain_id
        self._balance = balance
        self.fail_on = fail_on
        self.deployments: List[Tuple[str, Tuple[Any, ...]]] = []

    @property
    def network_name(self) -> str:
        return "local"

    @property
    def chain_id(self) -> int:
        return self._chain_id

    @property
    def deployer_address(self) -> str:
        return self._deployer

    @property
    def balance(self) -> int:
        return self._balance

    def deploy(self, contract_name: str, *args: Any) -> str:
        self.deployments.append((contract_name, args))
        if contract_name == self.fail_on:
            raise RuntimeError(f"execution reverted while deploying {contract_name}")
        return contract_address(len(self.deployments))


@pytest.fixture
def creator(accounts):
    return accounts[0]


@pytest.fixture
def deployments_dir(tmp_path: Path) -> Path:
    return tmp_path / "deployments"


@pytest.fixture
def config() -> DeploymentConfig:
    return DeploymentConfig(network="testnet")


@pytest.fixture
def client(creator) -> ScriptedDeploymentClient:
    return ScriptedDeploymentClient(deployer=creator.address)


@pytest.fixture
def make_client(creator):
    def _make_client(**kwargs) -> ScriptedDeploymentClient:
        return ScriptedDeploymentClient(deployer=creator.address, **kwargs)

    return _make_client


@pytest.fixture
def sample_record(creator) -> DeploymentRecord:
    dao_address = contract_address(2)
    return DeploymentRecord(
        network="testnet",
        chain_id=CHAIN_ID,
        timestamp="2025-03-01T09:30:00.000Z",
        deployer=creator.address,
        contracts={
            "Token": ContractDeployment(
                address=contract_address(1),
                constructor_args=["Urban Parking Token", "UPT", "1000000000000000"],
            ),
            "DAO": ContractDeployment(address=dao_address, constructor_args=[]),
            "Market": ContractDeployment(
                address=contract_address(3), constructor_args=[dao_address]
            ),
        },
    )


def read_json(filepath: Path) -> dict:
    with open(filepath) as f:
        return json.load(f)
