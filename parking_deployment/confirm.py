from typing import Any, Sequence

from parking_deployment.exceptions import DeploymentAborted


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        raise DeploymentAborted(f"Deployment of {contract_name} declined.")


def _confirm_arguments(contract_name: str, args: Sequence[Any]) -> None:
    """Asks the user to confirm the constructor arguments for a single contract."""
    if len(args) == 0:
        print(f"\n(i) No constructor arguments for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nConstructor arguments for {contract_name}")
    for position, value in enumerate(args):
        print(f"\t[{position}]={value}")
    _confirm_deployment(contract_name)
