import json
import re

import pytest

from parking_deployment.exceptions import DeploymentError, InvalidDeploymentRecord
from parking_deployment.records import (
    ContractDeployment,
    load_record,
    new_record,
    read_records,
    record_filepath,
    save_record,
)
from tests.conftest import CHAIN_ID, contract_address, read_json


def test_load_missing_record_returns_none(deployments_dir):
    assert load_record("testnet", deployments_dir=deployments_dir) is None
    assert not deployments_dir.exists()


def test_save_then_load_round_trip(sample_record, deployments_dir):
    filepath = save_record(sample_record, deployments_dir=deployments_dir)
    assert filepath == deployments_dir / "testnet.json"

    loaded = load_record("testnet", deployments_dir=deployments_dir)
    assert loaded == sample_record
    assert list(loaded.contracts) == ["Token", "DAO", "Market"]


def test_round_trip_with_no_contracts(sample_record, deployments_dir):
    empty_record = sample_record._replace(contracts={})
    save_record(empty_record, deployments_dir=deployments_dir)

    loaded = load_record("testnet", deployments_dir=deployments_dir)
    assert loaded == empty_record
    assert loaded.contracts == {}


def test_save_creates_missing_directories(sample_record, tmp_path):
    nested = tmp_path / "a" / "b" / "deployments"
    save_record(sample_record, deployments_dir=nested)
    assert (nested / "testnet.json").exists()

    # directory already exists the second time
    save_record(sample_record, deployments_dir=nested)
    assert (nested / "testnet.json").exists()


def test_last_write_wins(sample_record, deployments_dir):
    save_record(sample_record, deployments_dir=deployments_dir)

    second = sample_record._replace(
        timestamp="2025-03-02T10:00:00.000Z",
        contracts={
            "Token": ContractDeployment(
                address=contract_address(42), constructor_args=["Other", "OTH", "5"]
            )
        },
    )
    save_record(second, deployments_dir=deployments_dir)

    loaded = load_record("testnet", deployments_dir=deployments_dir)
    assert loaded == second
    assert "DAO" not in loaded.contracts
    assert "Market" not in loaded.contracts


def test_records_are_keyed_by_network(sample_record, deployments_dir):
    save_record(sample_record, deployments_dir=deployments_dir)
    other = sample_record._replace(network="sepolia", chain_id=11155111)
    save_record(other, deployments_dir=deployments_dir)

    assert load_record("testnet", deployments_dir=deployments_dir) == sample_record
    assert load_record("sepolia", deployments_dir=deployments_dir) == other


def test_json_layout(sample_record, deployments_dir):
    filepath = save_record(sample_record, deployments_dir=deployments_dir)
    data = read_json(filepath)

    assert list(data) == ["network", "chainId", "timestamp", "deployer", "contracts"]
    assert data["network"] == "testnet"
    assert data["chainId"] == CHAIN_ID
    assert data["deployer"] == sample_record.deployer
    assert data["contracts"]["Token"] == {
        "address": contract_address(1),
        "constructorArgs": ["Urban Parking Token", "UPT", "1000000000000000"],
    }
    assert data["contracts"]["DAO"]["constructorArgs"] == []
    assert data["contracts"]["Market"]["constructorArgs"] == [contract_address(2)]

    text = filepath.read_text()
    assert text.startswith('{\n  "network": "testnet",')
    assert text.endswith("}\n")


def test_save_does_not_validate_deployment_order(sample_record, deployments_dir):
    market_only = sample_record._replace(
        contracts={"Market": sample_record.contracts["Market"]}
    )
    save_record(market_only, deployments_dir=deployments_dir)
    assert load_record("testnet", deployments_dir=deployments_dir) == market_only


def test_save_prints_confirmation(sample_record, deployments_dir, capsys):
    filepath = save_record(sample_record, deployments_dir=deployments_dir)
    assert str(filepath) in capsys.readouterr().out


def test_load_invalid_json_is_fatal(deployments_dir):
    deployments_dir.mkdir(parents=True)
    (deployments_dir / "testnet.json").write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        load_record("testnet", deployments_dir=deployments_dir)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"network": "testnet"},
        {
            "network": "testnet",
            "chainId": 1,
            "timestamp": "2025-03-01T09:30:00.000Z",
            "deployer": "0x0",
            "contracts": {"Token": {"address": "0x1"}},
        },
        {
            "network": "testnet",
            "chainId": "one",
            "timestamp": "2025-03-01T09:30:00.000Z",
            "deployer": "0x0",
            "contracts": {},
        },
    ],
)
def test_load_malformed_record_is_fatal(deployments_dir, data):
    deployments_dir.mkdir(parents=True)
    with open(deployments_dir / "testnet.json", "w") as f:
        json.dump(data, f)

    with pytest.raises(InvalidDeploymentRecord):
        load_record("testnet", deployments_dir=deployments_dir)

    # also catchable as the generic types
    with pytest.raises(ValueError):
        load_record("testnet", deployments_dir=deployments_dir)
    with pytest.raises(DeploymentError):
        load_record("testnet", deployments_dir=deployments_dir)


def test_default_deployments_dir_is_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert record_filepath("hardhat") == tmp_path / "deployments" / "hardhat.json"


def test_new_record_is_empty(creator):
    record = new_record(network="testnet", chain_id=CHAIN_ID, deployer=creator.address)
    assert record.contracts == {}
    assert record.chain_id == CHAIN_ID
    assert record.deployer == creator.address
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", record.timestamp)


def test_read_records(sample_record, deployments_dir):
    assert read_records(deployments_dir) == []

    save_record(sample_record._replace(network="sepolia"), deployments_dir=deployments_dir)
    save_record(sample_record, deployments_dir=deployments_dir)

    records = read_records(deployments_dir)
    assert [record.network for record in records] == ["sepolia", "testnet"]
