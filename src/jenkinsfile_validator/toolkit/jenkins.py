import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

import requests
from requests.auth import HTTPBasicAuth

from jenkinsfile_validator.cli_config import DEFAULT_RESPONSE_PREVIEW_LIMIT
from jenkinsfile_validator.exceptions import (
    APIError,
    AuthError,
    JenkinsConnectionError,
    MalformedResponse,
    PermissionDenied,
    RequestError,
)
from jenkinsfile_validator.toolkit.credentials import Credentials

logger = logging.getLogger(__name__)

STATUS_ENDPOINT = "/api/json"
VALIDATE_ENDPOINT = "/pipeline-model-converter/validateJenkinsfile"


@dataclass
class ServerInfo:
    node_name: Optional[str] = None
    mode: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any) -> "ServerInfo":
        if not isinstance(payload, dict):
            return cls()

        return cls(
            node_name=_optional_str(payload.get("nodeName")),
            mode=_optional_str(payload.get("mode")),
        )


@dataclass
class ValidationResult:
    result: str
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.result == "success"

    @classmethod
    def from_json(cls, payload: Any) -> "ValidationResult":
        """
        Interprets the body returned by the validation endpoint:

            {"status": "ok", "data": {"result": "failure", "errors": [{"error": "..."}]}}

        Raises APIError if Jenkins reports a status other than "ok" and
        MalformedResponse if the body does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise MalformedResponse("Invalid response format: expected a JSON object")

        status = payload.get("status")
        if not isinstance(status, str):
            raise MalformedResponse("Invalid response format: missing status field")
        if status != "ok":
            raise APIError(status)

        data = payload.get("data")
        result = data.get("result") if isinstance(data, dict) else None
        if result not in ("success", "failure"):
            raise MalformedResponse(
                "Invalid response format: missing or invalid data field"
            )

        errors = []
        if result == "failure":
            errors = _extract_errors(data.get("errors"))

        return cls(result=result, errors=errors)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _extract_errors(raw_errors: Any) -> List[str]:
    if not isinstance(raw_errors, list):
        return []

    return [
        entry["error"]
        for entry in raw_errors
        if isinstance(entry, dict) and isinstance(entry.get("error"), str)
    ]


def _status_text(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason or ''}".strip()


def _body_preview(response: requests.Response, limit: int) -> str:
    return response.content[:limit].decode("utf-8", errors="replace")


def _auth(credentials: Credentials) -> HTTPBasicAuth:
    return HTTPBasicAuth(credentials.username, credentials.token)


def check_connection(credentials: Credentials) -> ServerInfo:
    credentials.require_complete()

    url = credentials.base_url + STATUS_ENDPOINT
    logger.debug("GET %s as %s", url, credentials.username)

    try:
        response = requests.get(url, auth=_auth(credentials))
    except requests.exceptions.RequestException as e:
        raise JenkinsConnectionError(f"Error connecting to Jenkins: {e}") from e

    logger.debug("Jenkins answered %s", response.status_code)

    if response.status_code == 401:
        raise AuthError(
            "Authentication failed. Please check your username and API token"
        )
    if response.status_code == 403:
        raise PermissionDenied("Access forbidden. Please check your permissions")
    if response.status_code != 200:
        raise JenkinsConnectionError(
            f"Connection failed with status: {_status_text(response)}"
        )

    try:
        payload = response.json()
    except ValueError:
        logger.debug("Could not decode server information from %s", url)
        return ServerInfo()

    return ServerInfo.from_json(payload)


def validate_jenkinsfile(
    credentials: Credentials,
    jenkinsfile: Union[str, bytes],
    response_preview_limit: int = DEFAULT_RESPONSE_PREVIEW_LIMIT,
) -> ValidationResult:
    if response_preview_limit < 0:
        raise ValueError(
            f"response_preview_limit must be >= 0, got {response_preview_limit}"
        )
    credentials.require_complete()

    url = credentials.base_url + VALIDATE_ENDPOINT
    logger.debug(
        "POST %s as %s (length %d)", url, credentials.username, len(jenkinsfile)
    )

    try:
        response = requests.post(
            url,
            data={"jenkinsfile": jenkinsfile},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            auth=_auth(credentials),
        )
    except requests.exceptions.RequestException as e:
        raise JenkinsConnectionError(f"Error sending request: {e}") from e

    logger.debug("Jenkins answered %s", response.status_code)

    if response.status_code != 200:
        raise RequestError(
            status=_status_text(response),
            body=_body_preview(response, response_preview_limit),
        )

    try:
        payload = json.loads(response.content)
    except ValueError as e:
        raise MalformedResponse(f"Error parsing response: {e}") from e

    return ValidationResult.from_json(payload)
