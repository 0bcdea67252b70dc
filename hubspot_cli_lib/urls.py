from .config import ENV_QA, get_hubapi_domain_override
from .deprecation import deprecated


def get_env_url_string(env: str | None) -> str:
    if not isinstance(env, str):
        return ''
    return ENV_QA if env.lower() == ENV_QA else ''


def website_origin(env: str | None = None) -> str:
    return f'https://app.hubspot{get_env_url_string(env)}.com'


def api_origin(env: str | None = None, use_local_host: bool = False) -> str:
    domain = get_hubapi_domain_override()
    if not domain:
        prefix = 'local' if use_local_host else 'api'
        domain = f'{prefix}.hubapi{get_env_url_string(env)}'
    return f'https://{domain}.com'


@deprecated()
def get_hubspot_website_origin(env: str | None = None) -> str:
    return website_origin(env)


@deprecated()
def get_hubspot_api_origin(env: str | None = None, use_local_host: bool = False) -> str:
    return api_origin(env, use_local_host)
