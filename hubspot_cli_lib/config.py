import os

VERSION = '4.2.0'

GITHUB_API_URL = 'https://api.github.com'
GITHUB_RAW_URL = 'https://raw.githubusercontent.com'
DEFAULT_USER_AGENT_HEADERS = {'User-Agent': f'HubSpot CLI/{VERSION}'}

LOCAL_DEV_LIB_URL = 'https://github.com/HubSpot/hubspot-local-dev-lib'

ENV_QA = 'qa'
ENV_PROD = 'prod'

RELEASE_TYPE_RELEASE = 'RELEASE'
RELEASE_TYPE_REPOSITORY = 'REPOSITORY'


def get_github_token() -> str | None:
    return os.getenv('GITHUB_TOKEN') or None


def get_hubapi_domain_override() -> str | None:
    return os.getenv('HUBAPI_DOMAIN_OVERRIDE') or None
