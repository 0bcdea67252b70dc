"""Recursive mirroring of a GitHub repository subtree onto the local disk."""

import asyncio
import logging
import os
from typing import Awaitable, TypeVar

import aiofiles
import aiohttp

from .errors import (
    ContentsFetchError,
    ContentsNotFoundError,
    GitHubRequestError,
    RemoteServiceError,
)
from .github import GitHubClient
from .schemas import ContentEntry, ContentFilter, MirrorRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')


def classify_listing_error(err: GitHubRequestError) -> ContentsFetchError:
    if err.status == 404:
        return ContentsNotFoundError(f'Failed to fetch contents: {err.message or "Not Found"}')
    if err.is_server_error:
        if err.message:
            return RemoteServiceError(f'Failed to fetch contents: {err.message}')
        return RemoteServiceError('Failed to fetch contents: Check the status of GitHub')
    return ContentsFetchError(f'Failed to fetch contents: {err}')


class RepositoryContentMirror:
    """Reproduce a repository path under a local directory.

    Every directory level is a join-all barrier: its children are fanned out
    with ``asyncio.gather`` and the level completes once all of them have.
    The first failure propagates; files written before it are kept.

    Only the initial listing is reclassified into ``ContentsFetchError``
    subclasses. Failures inside the tree (child listings, downloads, writes)
    reach the caller as raised.
    """

    def __init__(
        self,
        client: GitHubClient | None = None,
        *,
        tasks_limit: int | None = None,
    ) -> None:
        self._client = client
        self._semaphore = asyncio.Semaphore(tasks_limit) if tasks_limit else None

    async def mirror(self, request: MirrorRequest) -> None:
        if self._client is not None and request.token:
            raise ValueError(
                'Pass the token either on the request or on the injected client, not both'
            )
        client = self._client or GitHubClient(request.token)
        parent_dir = os.path.dirname(request.destination_path)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)

        try:
            contents = await self.__list(client, request, request.source_path)
        except GitHubRequestError as err:
            raise classify_listing_error(err) from err
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as err:
            raise ContentsFetchError(f'Failed to fetch contents: {err}') from err

        await self.__mirror_entries(client, request, contents)

    async def __mirror_entries(
        self,
        client: GitHubClient,
        request: MirrorRequest,
        contents: ContentEntry | list[ContentEntry],
    ) -> None:
        entries = contents if isinstance(contents, list) else [contents]
        await asyncio.gather(
            *(self.__mirror_entry(client, request, entry) for entry in entries)
        )

    async def __mirror_entry(
        self,
        client: GitHubClient,
        request: MirrorRequest,
        entry: ContentEntry,
    ) -> None:
        destination = self.get_destination(request, entry.path)
        if request.filter is not None and not request.filter(entry.path, destination):
            return

        logger.debug(
            'Downloading content piece: %s from %s to %s',
            entry.path, entry.download_url, destination,
        )
        if entry.type == 'dir':
            children = await self.__list(client, request, entry.path)
            await self.__mirror_entries(client, request, children)
        elif entry.download_url:
            await self.__download(client, entry.download_url, destination)
        else:
            # submodules come back without a download url
            logger.warning('Skipping %s: no download url for %s entry', entry.path, entry.type)

    async def __list(
        self,
        client: GitHubClient,
        request: MirrorRequest,
        path: str,
    ) -> ContentEntry | list[ContentEntry]:
        return await self.__limited(client.get_contents(request.repository, path, request.ref))

    async def __download(self, client: GitHubClient, url: str, destination: str) -> None:
        data = await self.__limited(client.get_raw(url))
        os.makedirs(os.path.dirname(destination) or '.', exist_ok=True)
        async with aiofiles.open(destination, 'wb') as file_d:
            await file_d.write(data)

    async def __limited(self, awaitable: Awaitable[T]) -> T:
        if self._semaphore is None:
            return await awaitable
        async with self._semaphore:
            return await awaitable

    @staticmethod
    def get_destination(request: MirrorRequest, entry_path: str) -> str:
        source_path = request.source_path.strip('/')
        relative = entry_path.replace(source_path, '', 1) if source_path else entry_path
        relative = relative.lstrip('/')
        if not relative:
            return request.destination_path
        return os.path.join(request.destination_path, relative)


async def download_github_repo_contents(
    repository: str,
    source_path: str,
    destination_path: str,
    *,
    ref: str | None = None,
    filter: ContentFilter | None = None,
    token: str | None = None,
    tasks_limit: int | None = None,
) -> None:
    """Write files from a GitHub repository path to ``destination_path``."""
    request = MirrorRequest(
        repository=repository,
        source_path=source_path,
        destination_path=destination_path,
        ref=ref,
        filter=filter,
        token=token,
    )
    await RepositoryContentMirror(tasks_limit=tasks_limit).mirror(request)
