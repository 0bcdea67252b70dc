import json
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from .archive import extract_zip_archive
from .config import (
    DEFAULT_USER_AGENT_HEADERS,
    GITHUB_API_URL,
    GITHUB_RAW_URL,
    RELEASE_TYPE_RELEASE,
    RELEASE_TYPE_REPOSITORY,
)
from .deprecation import deprecated
from .errors import ContentsNotFoundError, GitHubRequestError
from .schemas import ContentEntry, ReleaseData

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        token: str | None = None,
        *,
        api_base_url: str = GITHUB_API_URL,
        raw_base_url: str = GITHUB_RAW_URL,
    ) -> None:
        self._token = token
        self._api_base_url = api_base_url.rstrip('/')
        self._raw_base_url = raw_base_url.rstrip('/')

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def raw_base_url(self) -> str:
        return self._raw_base_url

    @property
    def headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_USER_AGENT_HEADERS)
        if self._token:
            headers['Authorization'] = f'Bearer {self._token}'
        return headers

    def contents_url(self, repository: str, path: str) -> str:
        encoded_path = quote(path.strip('/'), safe='/')
        return f'{self._api_base_url}/repos/{repository}/contents/{encoded_path}'

    async def get_contents(
        self,
        repository: str,
        path: str,
        ref: str | None = None,
    ) -> ContentEntry | list[ContentEntry]:
        params = {'ref': ref} if ref else None
        parsed_resp = await self.get_json(self.contents_url(repository, path), params=params)
        if isinstance(parsed_resp, list):
            return [ContentEntry.model_validate(entry) for entry in parsed_resp]
        return ContentEntry.model_validate(parsed_resp)

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        async with aiohttp.ClientSession(headers=self.headers) as session:
            async with session.get(url, params=params) as resp:
                await self.__raise_for_status(resp, url)
                return await resp.json(content_type=None)

    async def get_raw(self, url: str) -> bytes:
        async with aiohttp.ClientSession(headers=self.headers) as session:
            async with session.get(url) as resp:
                await self.__raise_for_status(resp, url)
                return await resp.read()

    async def __raise_for_status(self, resp: aiohttp.ClientResponse, url: str) -> None:
        if resp.status < 400:
            return
        body = await resp.text()
        message = None
        if body:
            try:
                payload = json.loads(body)
            except ValueError:
                payload = None
            if isinstance(payload, dict):
                message = payload.get('message')
        raise GitHubRequestError(resp.status, message, url)


@deprecated()
async def fetch_json_from_repository(
    repository: str,
    file_path: str,
    ref: str,
    *,
    is_custom_path: bool = False,
    token: str | None = None,
) -> Any:
    """Fetch and parse a JSON file straight from raw.githubusercontent.com.

    A missing file on a user supplied path is fatal for the caller, so it
    raises; anything else is logged and ``None`` is returned.
    """
    client = GitHubClient(token)
    url = f'{client.raw_base_url}/{repository}/{ref}/{file_path}'
    logger.debug('Fetching %s...', url)
    try:
        return await client.get_json(url)
    except GitHubRequestError as err:
        if is_custom_path and err.status == 404:
            raise ContentsNotFoundError(
                f'Failed to fetch {file_path} from {repository}. '
                'Make sure the path points to a JSON file in that repository.'
            ) from err
        logger.error('An error occured fetching JSON file.')
        logger.debug('%s', err)
    except (aiohttp.ClientError, ValueError) as err:
        logger.error('An error occured fetching JSON file.')
        logger.debug('%s', err)
    return None


def normalize_release_tag(tag: str) -> str:
    tag = tag.strip().lower()
    if tag and not tag.startswith('v'):
        tag = f'v{tag}'
    return tag


async def _fetch_release_data(repository: str, tag: str, token: str | None) -> ReleaseData | None:
    tag = normalize_release_tag(tag)
    client = GitHubClient(token)
    if tag:
        url = f'{client.api_base_url}/repos/{repository}/releases/tags/{tag}'
    else:
        url = f'{client.api_base_url}/repos/{repository}/releases/latest'
    try:
        return ReleaseData.model_validate(await client.get_json(url))
    except GitHubRequestError as err:
        logger.error('Failed fetching release data for %s project.', tag or 'latest')
        if tag and err.status == 404:
            logger.error('project %s not found.', tag)
    except (aiohttp.ClientError, ValueError) as err:
        logger.error('Failed fetching release data for %s project.', tag or 'latest')
        logger.debug('%s', err)
    return None


@deprecated()
async def fetch_release_data(
    repository: str,
    tag: str = '',
    *,
    token: str | None = None,
) -> ReleaseData | None:
    return await _fetch_release_data(repository, tag, token)


async def _download_repo_zip(
    repository: str,
    tag: str,
    release_type: str,
    ref: str | None,
    token: str | None,
) -> bytes | None:
    client = GitHubClient(token)
    try:
        if release_type == RELEASE_TYPE_REPOSITORY:
            logger.info('Fetching %s with name %s...', release_type.lower(), repository)
            zip_url = f'{client.api_base_url}/repos/{repository}/zipball'
            if ref:
                zip_url = f'{zip_url}/{ref}'
        else:
            release_data = await _fetch_release_data(repository, tag, token)
            if release_data is None:
                return None
            zip_url = release_data.zipball_url
            logger.info('Fetching %s...', release_data.name)
        zip_data = await client.get_raw(zip_url)
    except (GitHubRequestError, aiohttp.ClientError) as err:
        logger.error('An error occured fetching the project source.')
        logger.debug('%s', err)
        return None
    logger.debug('Completed project fetch.')
    return zip_data


@deprecated()
async def download_github_repo_zip(
    repository: str,
    tag: str = '',
    release_type: str = RELEASE_TYPE_RELEASE,
    ref: str | None = None,
    *,
    token: str | None = None,
) -> bytes | None:
    return await _download_repo_zip(repository, tag, release_type, ref, token)


@deprecated()
async def clone_github_repo(
    dest: str,
    kind: str,
    repository: str,
    source_dir: str | None = None,
    *,
    project_version: str | None = None,
    theme_version: str | None = None,
    release_type: str = RELEASE_TYPE_RELEASE,
    ref: str | None = None,
    token: str | None = None,
) -> bool:
    """Write a copy of a boilerplate repository (or one folder of it) to ``dest``."""
    tag = project_version or theme_version or ''
    zip_data = await _download_repo_zip(repository, tag, release_type, ref, token)
    repo_name = repository.split('/')[-1]
    success = await extract_zip_archive(zip_data, repo_name, dest, source_dir=source_dir)
    if success:
        logger.info('Your new %s has been created in %s', kind, dest)
    return success
