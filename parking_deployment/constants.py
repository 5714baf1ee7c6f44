from pathlib import Path

import parking_deployment

#
# Filesystem
#

PACKAGE_DIR = Path(parking_deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = PACKAGE_DIR / "constructor_params"
DEPLOYMENTS_DIRNAME = "deployments"
RECORD_JSON_FORMAT = {"indent": 2}

#
# Networks
#

DEFAULT_NETWORK = "hardhat"
LOCAL_NETWORKS = ["local", "hardhat", "foundry"]

#
# Contracts
#

PARKING_TOKEN = "ParkingToken"
PARKING_DAO = "ParkingDAO"
PARKING_MARKET = "ParkingMarket"

# deployment record keys
TOKEN_KEY = "Token"
DAO_KEY = "DAO"
MARKET_KEY = "Market"

#
# Constructor defaults
#

DEFAULT_TOKEN_NAME = "Urban Parking Token"
DEFAULT_TOKEN_SYMBOL = "UPT"
DEFAULT_TOKEN_INITIAL_PRICE = 1_000_000_000_000_000  # 0.001 ETH in wei

#
# Environment
#

NETWORK_ENVVAR = "PARKING_NETWORK"
TOKEN_NAME_ENVVAR = "PARKING_TOKEN_NAME"
TOKEN_SYMBOL_ENVVAR = "PARKING_TOKEN_SYMBOL"
TOKEN_INITIAL_PRICE_ENVVAR = "PARKING_TOKEN_INITIAL_PRICE"
DEPLOYMENTS_DIR_ENVVAR = "PARKING_DEPLOYMENTS_DIR"
