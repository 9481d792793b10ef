import functools
import logging
from pathlib import Path
from typing import Callable, Optional

import typer

from jenkinsfile_validator.cli_config import CliConfig, DEFAULT_RESPONSE_PREVIEW_LIMIT
from jenkinsfile_validator.commands.config import config
from jenkinsfile_validator.commands.connection import connection_test
from jenkinsfile_validator.commands.validate import validate
from jenkinsfile_validator.exceptions import ValidatorError
from jenkinsfile_validator.toolkit.credentials import get_config_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Connects to a Jenkins instance and validates if a Jenkinsfile is valid."
)


def exit_on_error(command: Callable) -> Callable:
    """
    Reports validator errors on stderr and exits with status 1 instead of
    printing a traceback.
    """

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except ValidatorError as e:
            logger.debug("%s failed", command.__name__, exc_info=True)
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    return wrapper


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar="JENKINSFILE_VALIDATOR_CONFIG",
        help="Path of the validator config file. Defaults to ~/.validator_config.json.",
    ),
    verbose: bool = typer.Option(False, help="Show more information."),
    response_preview_limit: int = typer.Option(
        DEFAULT_RESPONSE_PREVIEW_LIMIT,
        min=0,
        help="Maximum number of bytes of an error response body to display.",
    ),
):
    cli_config = CliConfig(
        config_path=config_path or get_config_path(),
        verbose=verbose,
        response_preview_limit=response_preview_limit,
    )
    setup_logging(cli_config.verbose)

    ctx.obj = cli_config


COMMANDS = {
    "config": (config, "Sets validator config."),
    "validate": (validate, "Validates the Jenkinsfile."),
    "test": (connection_test, "Tests the Jenkins connection."),
}

for name, (command, short_help) in COMMANDS.items():
    app.command(name=name, short_help=short_help)(exit_on_error(command))


if __name__ == "__main__":
    app()
