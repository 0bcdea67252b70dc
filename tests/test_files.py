import os

import pytest

from hubspot_cli_lib import files

pytestmark = pytest.mark.filterwarnings('ignore::DeprecationWarning')


@pytest.fixture
def theme_dir(tmp_path):
    theme = tmp_path / 'themes' / 'My Theme'
    (theme / 'templates').mkdir(parents=True)
    (theme / 'Theme.JSON').write_text('{"label": "My Theme"}')
    (theme / 'templates' / 'home.html').write_text('<html></html>')
    return theme


def test_get_theme_json_path_walks_up(theme_dir):
    found = files.get_theme_json_path(str(theme_dir / 'templates' / 'home.html'))

    assert found == str(theme_dir / 'Theme.JSON')


def test_get_theme_json_path_missing(tmp_path, monkeypatch):
    start = tmp_path / 'project' / 'src'
    start.mkdir(parents=True)
    real_dirname = os.path.dirname

    def dirname_within_tmp(path):
        return path if path == str(tmp_path) else real_dirname(path)

    monkeypatch.setattr(files.os.path, 'dirname', dirname_within_tmp)

    assert files.get_theme_json_path(str(start)) is None


def test_get_theme_name_from_path(theme_dir):
    assert files.get_theme_name_from_path(str(theme_dir / 'templates')) == 'My Theme'


def test_get_theme_preview_url(theme_dir):
    url = files.get_theme_preview_url(str(theme_dir / 'templates' / 'home.html'), 123)

    assert url == 'https://app.hubspot.com/theme-previewer/123/edit/My%20Theme'


def test_get_theme_preview_url_qa(theme_dir):
    url = files.get_theme_preview_url(str(theme_dir), 123, env='qa')

    assert url == 'https://app.hubspotqa.com/theme-previewer/123/edit/My%20Theme'


def test_get_theme_preview_url_without_theme(tmp_path, monkeypatch):
    monkeypatch.setattr(files, '_find_up', lambda filename, start: None)

    assert files.get_theme_preview_url(str(tmp_path), 123) is None
