"""
Persistence of the Jenkins credentials (server URL, username, API token).

The record is stored as a flat JSON object in the user's home directory:

    {"jenkins_url": "...", "username": "...", "token": "..."}
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from jenkinsfile_validator.exceptions import (
    ConfigMissing,
    ParseError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".validator_config.json"


@dataclass
class Credentials:
    jenkins_url: str = ""
    username: str = ""
    token: str = ""

    def is_empty(self) -> bool:
        return not (self.jenkins_url or self.username or self.token)

    def is_complete(self) -> bool:
        return bool(self.jenkins_url and self.username and self.token)

    def require_complete(self) -> "Credentials":
        if not self.is_complete():
            raise ConfigMissing()
        return self

    @property
    def base_url(self) -> str:
        return self.jenkins_url.rstrip("/")


def get_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def mask_token(token: str) -> str:
    return "*" * len(token)


def load(path: Path) -> Credentials:
    """
    Reads the credentials file. A missing file is not an error and yields an
    empty record.
    """
    logger.debug("Loading credentials from %s", path)

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config file at %s", path)
        return Credentials()
    except OSError as e:
        raise ReadError(f"Error reading config file '{path}': {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Error parsing config file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Error parsing config file '{path}': expected a JSON object")

    values = {}
    for field in fields(Credentials):
        value = data.get(field.name, "")
        if not isinstance(value, str):
            raise ParseError(
                f"Error parsing config file '{path}': '{field.name}' must be a string"
            )
        values[field.name] = value

    return Credentials(**values)


def save(credentials: Credentials, path: Path) -> None:
    logger.debug("Saving credentials to %s", path)

    try:
        path.write_text(json.dumps(asdict(credentials), indent=2), encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Error writing config file '{path}': {e}") from e
