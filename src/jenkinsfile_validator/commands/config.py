from pathlib import Path
from typing import Callable, cast

import typer

from jenkinsfile_validator.cli_config import CliConfig
from jenkinsfile_validator.toolkit import credentials as credentials_store
from jenkinsfile_validator.toolkit.credentials import Credentials, mask_token

# (text, default, hide_input) -> answer
Prompter = Callable[[str, str, bool], str]


def terminal_prompt(text: str, default: str = "", hide_input: bool = False) -> str:
    answer = typer.prompt(
        text, default=default, show_default=bool(default), hide_input=hide_input
    )
    return answer.strip() or default


def _wants_update(prompt: Prompter) -> bool:
    answer = prompt("Do you want to update the configuration? (y/N)", "n", False)
    return answer.lower() in ("y", "yes")


def configure_credentials(
    config_path: Path, prompt: Prompter = terminal_prompt
) -> bool:
    """
    Interactively updates the stored credentials.

    Returns False if the user chose to keep an existing configuration.
    """
    credentials = credentials_store.load(config_path)

    typer.echo("Configure Jenkins Validator Settings")
    typer.echo("=====================================")

    if not credentials.is_empty():
        typer.echo("\nExisting configuration found:")
        typer.echo(f"Jenkins URL: {credentials.jenkins_url}")
        typer.echo(f"Username: {credentials.username}")
        if credentials.token:
            typer.echo(f"Token: {mask_token(credentials.token)}")
        typer.echo()

        if not _wants_update(prompt):
            typer.echo("Configuration unchanged.")
            return False
        typer.echo()

    updated = Credentials(
        jenkins_url=prompt("Jenkins URL", credentials.jenkins_url, False),
        username=prompt("Username", credentials.username, False),
        token=prompt("API Token", "", True),
    )
    credentials_store.save(updated, config_path)

    typer.echo("\nConfiguration saved successfully!")
    if not updated.is_complete():
        typer.echo(
            "Warning: the Jenkins URL, username and API token are all required "
            "to run 'validate' and 'test'.",
            err=True,
        )

    return True


def config(ctx: typer.Context):
    """Sets the Jenkins URL and credentials used to validate Jenkinsfiles."""
    cli_config = cast(CliConfig, ctx.obj)
    configure_credentials(cli_config.config_path)
