import json

import pytest
from typer.testing import CliRunner

from jenkinsfile_validator.commands.config import configure_credentials
from jenkinsfile_validator.exceptions import ParseError
from jenkinsfile_validator.main import app
from jenkinsfile_validator.toolkit.credentials import Credentials, load

runner = CliRunner()


def canned_prompter(answers):
    """Answers prompts from a dict, falling back to the prompt default."""
    asked = []

    def prompt(text, default, hide_input):
        asked.append((text, default, hide_input))
        return answers.get(text, default)

    prompt.asked = asked
    return prompt


def test_configure_without_existing_config(config_path):
    prompt = canned_prompter(
        {
            "Jenkins URL": "https://jenkins.example.com",
            "Username": "alice",
            "API Token": "s3cr3t",
        }
    )

    assert configure_credentials(config_path, prompt=prompt)

    assert load(config_path) == Credentials(
        jenkins_url="https://jenkins.example.com", username="alice", token="s3cr3t"
    )
    assert prompt.asked == [
        ("Jenkins URL", "", False),
        ("Username", "", False),
        ("API Token", "", True),
    ]


def test_configure_keeps_existing_config(configured):
    before = configured.read_text()
    prompt = canned_prompter({})

    assert not configure_credentials(configured, prompt=prompt)

    assert configured.read_text() == before
    assert prompt.asked == [("Do you want to update the configuration? (y/N)", "n", False)]


def test_configure_updates_with_previous_values_as_defaults(configured):
    prompt = canned_prompter(
        {"Do you want to update the configuration? (y/N)": "YES", "API Token": "n3w"}
    )

    assert configure_credentials(configured, prompt=prompt)

    assert load(configured) == Credentials(
        jenkins_url="https://jenkins.example.com", username="alice", token="n3w"
    )
    assert ("Jenkins URL", "https://jenkins.example.com", False) in prompt.asked
    assert ("Username", "alice", False) in prompt.asked


def test_configure_malformed_config(config_path):
    config_path.write_text("{")

    with pytest.raises(ParseError):
        configure_credentials(config_path, prompt=canned_prompter({}))


def test_config_command_masks_existing_token(configured):
    result = runner.invoke(app, ["--config", str(configured), "config"], input="n\n")

    assert result.exit_code == 0, result.output
    assert "Existing configuration found:" in result.output
    assert "Token: ******" in result.output
    assert "s3cr3t" not in result.output
    assert "Configuration unchanged." in result.output


def test_config_command_prompts_on_terminal(config_path):
    result = runner.invoke(
        app,
        ["--config", str(config_path), "config"],
        input="https://jenkins.example.com\nalice\ns3cr3t\n",
    )

    assert result.exit_code == 0, result.output
    assert "Configuration saved successfully!" in result.output
    assert json.loads(config_path.read_text()) == {
        "jenkins_url": "https://jenkins.example.com",
        "username": "alice",
        "token": "s3cr3t",
    }


def test_config_command_warns_about_incomplete_config(config_path):
    result = runner.invoke(
        app, ["--config", str(config_path), "config"], input="https://ci\nbob\n\n"
    )

    assert result.exit_code == 0, result.output
    assert load(config_path) == Credentials(jenkins_url="https://ci", username="bob")
    assert "Warning:" in result.output


def test_config_command_reports_malformed_config(config_path):
    config_path.write_text("[]")

    result = runner.invoke(app, ["--config", str(config_path), "config"])

    assert result.exit_code == 1
    assert "Error parsing config file" in result.output
