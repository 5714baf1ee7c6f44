#!/usr/bin/python3
import click

from parking_deployment.options import deployments_dir_option
from parking_deployment.records import read_records


@click.command(name="list-deployments")
@deployments_dir_option
def cli(deployments_dir):
    """List the stored deployment records."""
    records = read_records(deployments_dir)
    if not records:
        click.secho("No deployment records found.", fg="red")
        return

    for record in records:
        click.secho(f"\n{record.network} (chain ID {record.chain_id})", fg="green")
        click.secho(f"    Deployed {record.timestamp} by {record.deployer}", fg="yellow")
        for index, (name, contract) in enumerate(record.contracts.items(), start=1):
            click.secho(f"        {index}. {name} {contract.address}", fg="cyan")


if __name__ == "__main__":
    cli()
