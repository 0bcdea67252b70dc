"""Sandbox account management wrappers.

Kept so older callers keep working; new code should use the sandbox helpers
of hubspot-local-dev-lib.
"""

from typing import Any

from .deprecation import deprecated
from .hubapi import HubApiClient

SANDBOX_API_PATH = 'sandbox-hubs/v1'
SANDBOXES_SYNC_API_PATH = 'sandboxes-sync/v1'


@deprecated()
async def create_sandbox(
    client: HubApiClient,
    account_id: int,
    name: str,
    sandbox_type: str,
) -> dict[str, Any]:
    resp = await client.post(
        account_id,
        SANDBOX_API_PATH,
        body={'name': name, 'type': sandbox_type},
    )
    return {'name': name, **(resp or {})}


@deprecated()
async def delete_sandbox(
    client: HubApiClient,
    parent_account_id: int,
    sandbox_account_id: int,
) -> dict[str, Any]:
    resp = await client.delete(parent_account_id, f'{SANDBOX_API_PATH}/{sandbox_account_id}')
    return {
        'parentAccountId': parent_account_id,
        'sandboxAccountId': sandbox_account_id,
        **(resp or {}),
    }


@deprecated()
async def get_sandbox_usage_limits(
    client: HubApiClient,
    parent_account_id: int,
    sandbox_account_id: int | None = None,
) -> Any:
    # usage is tracked per parent; sandbox_account_id is accepted for older callers
    resp = await client.get(
        parent_account_id,
        f'{SANDBOX_API_PATH}/parent/{parent_account_id}/usage',
    )
    return resp and resp.get('usage')


@deprecated()
async def initiate_sync(
    client: HubApiClient,
    from_hub_id: int,
    to_hub_id: int,
    tasks: list[dict[str, Any]],
    sandbox_hub_id: int,
) -> Any:
    return await client.post(
        from_hub_id,
        f'{SANDBOXES_SYNC_API_PATH}/tasks/initiate/{sandbox_hub_id}',
        body={
            'command': 'SYNC',
            'fromHubId': from_hub_id,
            'toHubId': to_hub_id,
            'tasks': tasks,
        },
    )


@deprecated()
async def fetch_task_status(client: HubApiClient, account_id: int, task_id: int) -> Any:
    return await client.get(account_id, f'{SANDBOXES_SYNC_API_PATH}/tasks/{task_id}')


@deprecated()
async def fetch_types(client: HubApiClient, account_id: int, to_hub_id: int) -> Any:
    resp = await client.get(
        account_id,
        f'{SANDBOXES_SYNC_API_PATH}/types',
        params={'toHubId': to_hub_id},
    )
    return resp and resp.get('results')
