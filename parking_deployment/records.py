import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

from eth_typing import ChecksumAddress

from parking_deployment.constants import DEPLOYMENTS_DIRNAME, RECORD_JSON_FORMAT
from parking_deployment.exceptions import InvalidDeploymentRecord
from parking_deployment.utils import _load_json

ChainId = int
RecordKey = str


class ContractDeployment(NamedTuple):
    """A single deployed contract and the arguments it was constructed with."""

    address: ChecksumAddress
    constructor_args: List[Any]


class DeploymentRecord(NamedTuple):
    """
    Snapshot of one deployment run against a network.

    The record is keyed by `network`; `contracts` is filled in deployment
    order and may hold any subset of the Token, DAO and Market entries.
    """

    network: str
    chain_id: ChainId
    timestamp: str
    deployer: ChecksumAddress
    contracts: Dict[RecordKey, ContractDeployment]


def _timestamp() -> str:
    """Returns the current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


def new_record(network: str, chain_id: ChainId, deployer: ChecksumAddress) -> DeploymentRecord:
    """Returns a fresh record with no contract entries."""
    return DeploymentRecord(
        network=network,
        chain_id=int(chain_id),
        timestamp=_timestamp(),
        deployer=deployer,
        contracts=dict(),
    )


def get_deployments_dir(deployments_dir: Optional[Path] = None) -> Path:
    if deployments_dir is None:
        return Path.cwd() / DEPLOYMENTS_DIRNAME
    return Path(deployments_dir).absolute()


def record_filepath(network: str, deployments_dir: Optional[Path] = None) -> Path:
    """Returns the filepath of the record stored for a network."""
    return get_deployments_dir(deployments_dir) / f"{network}.json"


def _record_to_json(record: DeploymentRecord) -> Dict[str, Any]:
    contracts = dict()
    for key, contract in record.contracts.items():
        contracts[key] = {
            "address": contract.address,
            "constructorArgs": list(contract.constructor_args),
        }
    return {
        "network": record.network,
        "chainId": record.chain_id,
        "timestamp": record.timestamp,
        "deployer": record.deployer,
        "contracts": contracts,
    }


def _record_from_json(data: Any, filepath: Path) -> DeploymentRecord:
    try:
        contracts = dict()
        for key, contract in data["contracts"].items():
            constructor_args = contract["constructorArgs"]
            if not isinstance(constructor_args, list):
                raise TypeError(f"constructorArgs of {key} is not a list")
            contracts[key] = ContractDeployment(
                address=contract["address"],
                constructor_args=constructor_args,
            )
        record = DeploymentRecord(
            network=data["network"],
            chain_id=int(data["chainId"]),
            timestamp=data["timestamp"],
            deployer=data["deployer"],
            contracts=contracts,
        )
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise InvalidDeploymentRecord(f"Malformed deployment record at {filepath}: {e}") from e
    return record


def read_record(filepath: Path) -> DeploymentRecord:
    """Reads a deployment record from a file."""
    data = _load_json(filepath)
    return _record_from_json(data, filepath)


def load_record(network: str, deployments_dir: Optional[Path] = None) -> Optional[DeploymentRecord]:
    """
    Loads the stored record for a network.

    Returns None if no record has been stored for the network yet.
    Malformed records are not recovered from.
    """
    filepath = record_filepath(network=network, deployments_dir=deployments_dir)
    if not filepath.exists():
        return None
    return read_record(filepath)


def save_record(record: DeploymentRecord, deployments_dir: Optional[Path] = None) -> Path:
    """Writes a record to storage, replacing any record stored for the same network."""
    filepath = record_filepath(network=record.network, deployments_dir=deployments_dir)

    # Create the deployments directory if it does not exist
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as file:
        json.dump(_record_to_json(record), file, **RECORD_JSON_FORMAT)
        file.write("\n")

    print(f"\n(i) Deployment record saved to {filepath}")
    return filepath


def read_records(deployments_dir: Optional[Path] = None) -> List[DeploymentRecord]:
    """Returns all stored records, sorted by network name."""
    directory = get_deployments_dir(deployments_dir)
    if not directory.is_dir():
        return list()
    records = [read_record(filepath) for filepath in directory.glob("*.json")]
    records.sort(key=lambda record: record.network)
    return records
