import sys
import traceback
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, NewType, Optional

from eth_typing import ChecksumAddress

from parking_deployment.client import DeploymentClient
from parking_deployment.config import DeploymentConfig
from parking_deployment.constants import (
    DAO_KEY,
    MARKET_KEY,
    PARKING_DAO,
    PARKING_MARKET,
    PARKING_TOKEN,
    TOKEN_KEY,
)
from parking_deployment.exceptions import NetworkMismatchError
from parking_deployment.records import (
    ContractDeployment,
    DeploymentRecord,
    load_record,
    new_record,
    save_record,
)
from parking_deployment.utils import format_ether

# Address of the ParkingDAO; the ParkingMarket sends its fees there.
FeeCollector = NewType("FeeCollector", ChecksumAddress)


class DeploymentStage(Enum):
    INIT = "init"
    DEPLOYING_TOKEN = "deploying_token"
    DEPLOYING_DAO = "deploying_dao"
    DEPLOYING_MARKET = "deploying_market"
    DONE = "done"
    FAILED = "failed"


class DeploymentResult(NamedTuple):
    stage: DeploymentStage
    record: DeploymentRecord
    record_filepath: Optional[Path] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.stage is DeploymentStage.DONE


class ParkingDeployer:
    """
    Deploys ParkingToken, ParkingDAO and ParkingMarket in order and
    records each deployment as soon as it is confirmed.

    The run is written to storage once: in full on success, or as a partial
    snapshot on the first failure if anything was deployed before it.
    There is no retry and no resumption from a previous partial record.
    """

    def __init__(
        self,
        client: DeploymentClient,
        config: DeploymentConfig,
        deployments_dir: Optional[Path] = None,
    ):
        self.client = client
        self.config = config
        self.deployments_dir = deployments_dir
        self.stage = DeploymentStage.INIT
        self.history: List[DeploymentStage] = [DeploymentStage.INIT]

    def _advance(self, stage: DeploymentStage) -> None:
        self.stage = stage
        self.history.append(stage)

    def _print_deployment_info(self) -> None:
        print(
            "Deployment Configuration:",
            f"\tNetwork: {self.config.network}",
            f"\tProvider Network: {self.client.network_name}",
            f"\tChain ID: {self.client.chain_id}",
            f"\tDeployer: {self.client.deployer_address}",
            f"\tBalance: {format_ether(self.client.balance)} ETH",
            sep="\n",
        )

    def _print_constructor_params(self) -> None:
        print(
            "\nConstructor Parameters:",
            f"\tToken Name: {self.config.token_name}",
            f"\tToken Symbol: {self.config.token_symbol}",
            f"\tToken Initial Price: {format_ether(self.config.token_initial_price)} ETH",
            sep="\n",
        )

    def _deploy_token(self, record: DeploymentRecord) -> ChecksumAddress:
        self._advance(DeploymentStage.DEPLOYING_TOKEN)
        print(f"\n1. Deploying {PARKING_TOKEN}...")
        address = self.client.deploy(
            PARKING_TOKEN,
            self.config.token_name,
            self.config.token_symbol,
            self.config.token_initial_price,
        )
        print(f"\t{PARKING_TOKEN} deployed to: {address}")
        record.contracts[TOKEN_KEY] = ContractDeployment(
            address=address, constructor_args=self.config.token_constructor_args
        )
        return address

    def _deploy_dao(self, record: DeploymentRecord) -> FeeCollector:
        self._advance(DeploymentStage.DEPLOYING_DAO)
        print(f"\n2. Deploying {PARKING_DAO}...")
        address = self.client.deploy(PARKING_DAO)
        print(f"\t{PARKING_DAO} deployed to: {address}")
        record.contracts[DAO_KEY] = ContractDeployment(address=address, constructor_args=[])
        return FeeCollector(address)

    def _deploy_market(
        self, record: DeploymentRecord, fee_collector: FeeCollector
    ) -> ChecksumAddress:
        self._advance(DeploymentStage.DEPLOYING_MARKET)
        print(f"\n3. Deploying {PARKING_MARKET}...")
        address = self.client.deploy(PARKING_MARKET, fee_collector)
        print(f"\t{PARKING_MARKET} deployed to: {address}")
        print(f"\tFee Collector (DAO): {fee_collector}")
        record.contracts[MARKET_KEY] = ContractDeployment(
            address=address, constructor_args=[fee_collector]
        )
        return address

    def _print_summary(self, record: DeploymentRecord) -> None:
        print("\nDeployment completed successfully!")
        print("\nDeployment Summary:")
        for key, contract in record.contracts.items():
            print(f"\t{key}: {contract.address}")

    def _fail(self, record: DeploymentRecord, error: Exception) -> DeploymentResult:
        self._advance(DeploymentStage.FAILED)
        print("\nDeployment failed:", file=sys.stderr)
        print(f"\tError: {error}", file=sys.stderr)
        print(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            file=sys.stderr,
        )

        filepath = None
        if record.contracts:
            print("\nWARNING: Saving partial deployment record...")
            filepath = save_record(record, deployments_dir=self.deployments_dir)

        return DeploymentResult(
            stage=self.stage, record=record, record_filepath=filepath, error=error
        )

    def run(self) -> DeploymentResult:
        if self.stage is not DeploymentStage.INIT:
            raise RuntimeError(f"Deployer already ran (stage: {self.stage.value}).")

        print("Starting Urban Parking deployment...\n")
        self._print_deployment_info()

        existing_record = load_record(self.config.network, deployments_dir=self.deployments_dir)
        if existing_record is not None:
            if existing_record.chain_id != self.client.chain_id:
                raise NetworkMismatchError(
                    f"Deployment record for '{self.config.network}' is for chain ID "
                    f"{existing_record.chain_id}, but the provider is on chain ID "
                    f"{self.client.chain_id}. Use --network-name to pick another record."
                )
            print("\nWARNING: Existing deployment record found. It will be overwritten.")

        record = new_record(
            network=self.config.network,
            chain_id=self.client.chain_id,
            deployer=self.client.deployer_address,
        )

        try:
            self._print_constructor_params()
            self._deploy_token(record)
            fee_collector = self._deploy_dao(record)
            self._deploy_market(record, fee_collector)
        except Exception as e:
            return self._fail(record, e)

        filepath = save_record(record, deployments_dir=self.deployments_dir)
        self._advance(DeploymentStage.DONE)
        self._print_summary(record)
        return DeploymentResult(stage=self.stage, record=record, record_filepath=filepath)
