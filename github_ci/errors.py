"""Errors raised while building the CI status summary."""


class GithubCIError(Exception):
    """Base error. The message is shown to the user in the status bar."""

    @property
    def message(self) -> str:
        return str(self)


class ConfigError(GithubCIError):
    """The configuration file, section or a required key is missing."""


class TransportError(GithubCIError):
    """A network call did not yield a usable response body."""


class ResponseError(GithubCIError):
    """The API answered with a body of an unexpected shape."""


class UnknownStateError(ResponseError):
    """A status state that has no icon."""

    def __init__(self, state):
        super().__init__(f"Unknown CI state '{state}'")
        self.state = state
