class CliLibError(Exception):
    """Base class for errors raised by hubspot_cli_lib."""


class GitHubRequestError(CliLibError):
    """A GitHub endpoint answered with a non-success status."""

    def __init__(self, status: int, message: str | None = None, url: str | None = None) -> None:
        self.status = status
        self.message = message
        self.url = url
        super().__init__(f'GitHub request failed with status {status}: {message or url}')

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status <= 599


class ContentsFetchError(CliLibError):
    """Listing repository contents failed."""


class ContentsNotFoundError(ContentsFetchError):
    pass


class RemoteServiceError(ContentsFetchError):
    pass


class HubApiError(CliLibError):
    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        self.message = message
        super().__init__(f'HubSpot API request failed with status {status}: {message}')
