import json
from unittest.mock import AsyncMock, MagicMock

from hubspot_cli_lib.errors import GitHubRequestError
from hubspot_cli_lib.schemas import ContentEntry


def make_response(status: int = 200, *, json_body=None, text: str = '', raw: bytes = b''):
    resp = MagicMock()
    resp.status = status
    resp.json = AsyncMock(return_value=json_body)
    resp.text = AsyncMock(return_value=text if text or json_body is None else json.dumps(json_body))
    resp.read = AsyncMock(return_value=raw)
    return resp


def bind_response(request_mock: MagicMock, resp: MagicMock) -> None:
    request_mock.return_value.__aenter__.return_value = resp


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient keyed by repository path."""

    def __init__(self, listings: dict, downloads: dict[str, bytes]) -> None:
        self.listings = listings
        self.downloads = downloads
        self.listed_paths: list[tuple[str, str, str | None]] = []
        self.downloaded_urls: list[str] = []

    async def get_contents(self, repository: str, path: str, ref: str | None = None):
        self.listed_paths.append((repository, path, ref))
        if path not in self.listings:
            raise GitHubRequestError(404, 'Not Found', path)
        listing = self.listings[path]
        if isinstance(listing, Exception):
            raise listing
        if isinstance(listing, list):
            return [ContentEntry.model_validate(entry) for entry in listing]
        return ContentEntry.model_validate(listing)

    async def get_raw(self, url: str) -> bytes:
        self.downloaded_urls.append(url)
        return self.downloads[url]
