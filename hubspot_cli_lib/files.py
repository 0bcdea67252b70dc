import logging
import os
from urllib.parse import quote

from .deprecation import deprecated
from .urls import website_origin

logger = logging.getLogger(__name__)

THEME_JSON = 'theme.json'


def _find_up(filename: str, start: str) -> str | None:
    current = os.path.abspath(start)
    while True:
        if os.path.isdir(current):
            for entry in os.listdir(current):
                if entry.lower() == filename and os.path.isfile(os.path.join(current, entry)):
                    return os.path.join(current, entry)
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


@deprecated('hubspot-local-dev-lib cms/themes')
def get_theme_json_path(path: str) -> str | None:
    return _find_up(THEME_JSON, path)


def get_theme_name_from_path(file_path: str) -> str | None:
    theme_json_path = _find_up(THEME_JSON, file_path)
    if not theme_json_path:
        return None
    theme_dir = os.path.basename(os.path.dirname(theme_json_path))
    return theme_dir or None


@deprecated('hubspot-local-dev-lib cms/themes')
def get_theme_preview_url(
    file_path: str,
    account_id: int | str,
    env: str | None = None,
) -> str | None:
    theme_name = get_theme_name_from_path(file_path)
    if not theme_name:
        logger.debug('No %s found above %s', THEME_JSON, file_path)
        return None
    encoded_name = quote(theme_name, safe="!*'()")
    return f'{website_origin(env)}/theme-previewer/{account_id}/edit/{encoded_name}'
