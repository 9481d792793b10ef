from typing import cast

import typer

from jenkinsfile_validator.cli_config import CliConfig
from jenkinsfile_validator.toolkit import credentials as credentials_store
from jenkinsfile_validator.toolkit.jenkins import check_connection


def connection_test(ctx: typer.Context):
    """Tests the connection to Jenkins using the configured credentials."""
    cli_config = cast(CliConfig, ctx.obj)

    credentials = credentials_store.load(cli_config.config_path).require_complete()

    typer.echo("Testing connection to Jenkins...")
    typer.echo(f"Jenkins URL: {credentials.jenkins_url}")
    typer.echo(f"Username: {credentials.username}")

    server_info = check_connection(credentials)

    typer.echo("\nConnection successful!")
    if server_info.node_name is not None:
        typer.echo(f"Connected to Jenkins node: {server_info.node_name}")
    if server_info.mode is not None:
        typer.echo(f"Jenkins mode: {server_info.mode}")
