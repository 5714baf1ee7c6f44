from pathlib import Path

import click

from parking_deployment.constants import (
    DEPLOYMENTS_DIR_ENVVAR,
    NETWORK_ENVVAR,
    TOKEN_INITIAL_PRICE_ENVVAR,
    TOKEN_NAME_ENVVAR,
    TOKEN_SYMBOL_ENVVAR,
)
from parking_deployment.types import WeiAmount

# Constructor options default to None so that a params file value can fill in
# whatever is not given on the command line or in the environment.

network_name_option = click.option(
    "--network-name",
    "-n",
    help="Network identifier the deployment record is stored under.",
    envvar=NETWORK_ENVVAR,
    type=click.STRING,
    required=False,
)

token_name_option = click.option(
    "--token-name",
    help="Display name of the ParkingToken.",
    envvar=TOKEN_NAME_ENVVAR,
    type=click.STRING,
    required=False,
)

token_symbol_option = click.option(
    "--token-symbol",
    help="Symbol of the ParkingToken.",
    envvar=TOKEN_SYMBOL_ENVVAR,
    type=click.STRING,
    required=False,
)

token_initial_price_option = click.option(
    "--token-initial-price",
    help="Initial ParkingToken price in wei.",
    envvar=TOKEN_INITIAL_PRICE_ENVVAR,
    type=WeiAmount(),
    required=False,
)

params_file_option = click.option(
    "--params-file",
    "-p",
    help="YAML file with constructor parameters.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

deployments_dir_option = click.option(
    "--deployments-dir",
    "-o",
    help="Directory deployment records are stored in. Defaults to ./deployments",
    envvar=DEPLOYMENTS_DIR_ENVVAR,
    type=click.Path(file_okay=False, path_type=Path),
    required=False,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish contract sources to the network's block explorer.",
    default=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions and skip confirmation prompts.",
    is_flag=True,
    default=False,
)
