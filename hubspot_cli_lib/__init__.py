"""Asynchronous helpers kept for compatibility with the old HubSpot cli-lib."""

from . import files, sandboxes, table, urls
from .config import VERSION as __version__
from .errors import (
    CliLibError,
    ContentsFetchError,
    ContentsNotFoundError,
    GitHubRequestError,
    HubApiError,
    RemoteServiceError,
)
from .github import GitHubClient
from .mirror import (
    RepositoryContentMirror,
    download_github_repo_contents,
)
from .schemas import ContentEntry, MirrorRequest

__all__ = [
    'files',
    'sandboxes',
    'table',
    'urls',
    'CliLibError',
    'ContentEntry',
    'ContentsFetchError',
    'ContentsNotFoundError',
    'GitHubClient',
    'GitHubRequestError',
    'HubApiError',
    'MirrorRequest',
    'RemoteServiceError',
    'RepositoryContentMirror',
    'download_github_repo_contents',
]
