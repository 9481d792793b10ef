import json
from pathlib import Path

import pytest

JENKINS_URL = "https://jenkins.example.com"


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / ".validator_config.json"


@pytest.fixture
def configured(config_path: Path) -> Path:
    config_path.write_text(
        json.dumps(
            {"jenkins_url": JENKINS_URL, "username": "alice", "token": "s3cr3t"}
        )
    )
    return config_path


@pytest.fixture
def jenkinsfile(tmp_path: Path) -> Path:
    path = tmp_path / "Jenkinsfile"
    path.write_text("pipeline {\n  agent any\n  stages {}\n}\n")
    return path
