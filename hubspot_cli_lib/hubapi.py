import json
import logging
from typing import Any

import aiohttp

from .config import DEFAULT_USER_AGENT_HEADERS
from .errors import HubApiError
from .urls import api_origin

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=60)


class HubApiClient:
    """Authenticated JSON calls against the HubSpot public API."""

    def __init__(
        self,
        access_token: str,
        *,
        env: str | None = None,
        use_local_host: bool = False,
        timeout: aiohttp.ClientTimeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._access_token = access_token
        self._base_url = api_origin(env, use_local_host)
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        return {
            **DEFAULT_USER_AGENT_HEADERS,
            'Authorization': f'Bearer {self._access_token}',
        }

    async def request(
        self,
        method: str,
        account_id: int | str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        url = f'{self._base_url}/{path.lstrip("/")}'
        query = {'portalId': str(account_id)}
        query.update({key: str(value) for key, value in (params or {}).items()})
        logger.debug('%s %s', method, url)
        async with aiohttp.ClientSession(headers=self.headers, timeout=self._timeout) as session:
            async with session.request(method, url, params=query, json=body) as resp:
                text = await resp.text()
                payload = self.__parse(text)
                if resp.status >= 400:
                    message = payload.get('message') if isinstance(payload, dict) else None
                    raise HubApiError(resp.status, message or text or None)
                return payload

    async def get(self, account_id: int | str, path: str, **kwargs: Any) -> Any:
        return await self.request('GET', account_id, path, **kwargs)

    async def post(self, account_id: int | str, path: str, **kwargs: Any) -> Any:
        return await self.request('POST', account_id, path, **kwargs)

    async def delete(self, account_id: int | str, path: str, **kwargs: Any) -> Any:
        return await self.request('DELETE', account_id, path, **kwargs)

    @staticmethod
    def __parse(text: str) -> Any:
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text
