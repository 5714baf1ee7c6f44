#!/usr/bin/python3
import sys

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from parking_deployment.client import ApeDeploymentClient
from parking_deployment.config import DeploymentConfig
from parking_deployment.deployer import ParkingDeployer
from parking_deployment.options import (
    autosign_option,
    deployments_dir_option,
    network_name_option,
    params_file_option,
    token_initial_price_option,
    token_name_option,
    token_symbol_option,
    verify_option,
)
from parking_deployment.utils import get_live_network_name


@click.command(cls=ConnectedProviderCommand)
@account_option()
@network_option(required=True)
@network_name_option
@token_name_option
@token_symbol_option
@token_initial_price_option
@params_file_option
@deployments_dir_option
@verify_option
@autosign_option
def cli(
    account,
    network,
    network_name,
    token_name,
    token_symbol,
    token_initial_price,
    params_file,
    deployments_dir,
    verify,
    autosign,
):
    """
    Deploys ParkingToken, ParkingDAO and ParkingMarket and writes the
    deployment record to <deployments-dir>/<network-name>.json.
    On a live network the record name defaults to the provider network name.

    ape run deploy --network ethereum:sepolia:infura --network-name sepolia
    """
    config = DeploymentConfig.build(
        network=network_name,
        token_name=token_name,
        token_symbol=token_symbol,
        token_initial_price=token_initial_price,
        params_filepath=params_file,
        default_network=get_live_network_name(),
    )
    client = ApeDeploymentClient(account=account, verify=verify, autosign=autosign)
    deployer = ParkingDeployer(client=client, config=config, deployments_dir=deployments_dir)

    result = deployer.run()
    if not result.succeeded:
        sys.exit(1)


if __name__ == "__main__":
    cli()
