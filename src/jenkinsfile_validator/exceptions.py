from typing import List, Optional


class ValidatorError(Exception):
    pass


class ConfigMissing(ValidatorError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Please configure Jenkins settings first using 'jenkinsfile-validator config'"
        )


class ReadError(ValidatorError):
    pass


class WriteError(ValidatorError):
    pass


class ParseError(ValidatorError):
    pass


class JenkinsConnectionError(ValidatorError):
    pass


class AuthError(ValidatorError):
    pass


class PermissionDenied(ValidatorError):
    pass


class RequestError(ValidatorError):
    def __init__(self, status: str, body: str):
        super().__init__(f"Request failed with status: {status}, response: {body}")
        self.status = status
        self.body = body


class APIError(ValidatorError):
    def __init__(self, status: str):
        super().__init__(f"API request failed with status: {status}")
        self.status = status


class MalformedResponse(ValidatorError):
    pass


class ValidationFailed(ValidatorError):
    def __init__(self, errors: Optional[List[str]] = None):
        super().__init__("Jenkinsfile validation failed")
        self.errors = errors or []
