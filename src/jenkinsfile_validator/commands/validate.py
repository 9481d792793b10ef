import logging
from pathlib import Path
from typing import cast

import typer

from jenkinsfile_validator.cli_config import CliConfig
from jenkinsfile_validator.exceptions import ReadError, ValidationFailed
from jenkinsfile_validator.toolkit import credentials as credentials_store
from jenkinsfile_validator.toolkit.jenkins import validate_jenkinsfile

logger = logging.getLogger(__name__)


def read_jenkinsfile(path: Path) -> bytes:
    # Sent to Jenkins as-is, whatever the file encoding
    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadError(f"Error reading file '{path}': {e}") from e


def validate(
    ctx: typer.Context,
    jenkinsfile_path: Path = typer.Argument(..., help="Path to the Jenkinsfile."),
):
    """Validates a Jenkinsfile against the configured Jenkins instance."""
    cli_config = cast(CliConfig, ctx.obj)

    jenkinsfile = read_jenkinsfile(jenkinsfile_path)
    credentials = credentials_store.load(cli_config.config_path).require_complete()

    logger.debug("Validating %s against %s", jenkinsfile_path, credentials.jenkins_url)
    result = validate_jenkinsfile(
        credentials,
        jenkinsfile,
        response_preview_limit=cli_config.response_preview_limit,
    )

    if result.is_valid:
        typer.echo("✓ Jenkinsfile is valid")
        return

    typer.echo("✗ Jenkinsfile validation failed")
    if result.errors:
        typer.echo("\nErrors:")
        for error in result.errors:
            typer.echo(f"- {error}")

    raise ValidationFailed(result.errors)
