from abc import ABC, abstractmethod
from typing import Any, Optional

from ape import accounts, networks
from ape.api import AccountAPI
from ape.cli.choices import select_account
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from parking_deployment.confirm import _confirm_arguments
from parking_deployment.utils import check_explorer_plugin, get_contract_container, is_local_network


class DeploymentClient(ABC):
    """The blockchain operations a deployment run relies on."""

    @property
    @abstractmethod
    def network_name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def chain_id(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def deployer_address(self) -> ChecksumAddress:
        raise NotImplementedError

    @property
    @abstractmethod
    def balance(self) -> int:
        """Balance of the deployer account in wei."""
        raise NotImplementedError

    @abstractmethod
    def deploy(self, contract_name: str, *args: Any) -> ChecksumAddress:
        """
        Deploys a project contract, waits for it to be mined and
        returns the address it was deployed at.
        """
        raise NotImplementedError


class ApeDeploymentClient(DeploymentClient):
    """
    Deploys through the connected ape provider.
    """

    def __init__(
        self, account: Optional[AccountAPI] = None, verify: bool = False, autosign: bool = False
    ):
        if account is not None:
            self._account = account
        elif is_local_network():
            self._account = accounts.test_accounts[0]
        else:
            self._account = select_account()

        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
            if not is_local_network():
                self._account.set_autosign(True)
        self._autosign = autosign

        if verify:
            print("Checking plugins...")
            check_explorer_plugin()
        self.verify = verify

    def get_account(self) -> AccountAPI:
        return self._account

    @property
    def network_name(self) -> str:
        return networks.provider.network.name

    @property
    def chain_id(self) -> int:
        return networks.provider.chain_id

    @property
    def deployer_address(self) -> ChecksumAddress:
        return to_checksum_address(self._account.address)

    @property
    def balance(self) -> int:
        return self._account.balance

    def deploy(self, contract_name: str, *args: Any) -> ChecksumAddress:
        container = get_contract_container(contract_name)
        if not self._autosign:
            _confirm_arguments(contract_name, args)
        instance = self._account.deploy(container, *args, publish=self.verify)
        return to_checksum_address(instance.address)
