"""
Global configuration object for the CLI.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_RESPONSE_PREVIEW_LIMIT = 1024


@dataclass
class CliConfig:
    config_path: Path
    verbose: bool
    response_preview_limit: int = DEFAULT_RESPONSE_PREVIEW_LIMIT
