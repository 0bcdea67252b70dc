import pytest

from hubspot_cli_lib import urls


@pytest.fixture(autouse=True)
def no_domain_override(monkeypatch):
    monkeypatch.delenv('HUBAPI_DOMAIN_OVERRIDE', raising=False)


@pytest.mark.parametrize(
    ('env', 'expected'),
    [
        (None, 'https://app.hubspot.com'),
        ('prod', 'https://app.hubspot.com'),
        ('QA', 'https://app.hubspotqa.com'),
        (42, 'https://app.hubspot.com'),
    ],
)
def test_website_origin(env, expected):
    with pytest.warns(DeprecationWarning):
        assert urls.get_hubspot_website_origin(env) == expected


def test_api_origin():
    with pytest.warns(DeprecationWarning):
        assert urls.get_hubspot_api_origin() == 'https://api.hubapi.com'
    assert urls.api_origin('qa') == 'https://api.hubapiqa.com'
    assert urls.api_origin('qa', use_local_host=True) == 'https://local.hubapiqa.com'


def test_api_origin_domain_override(monkeypatch):
    monkeypatch.setenv('HUBAPI_DOMAIN_OVERRIDE', 'proxy.internal')

    assert urls.api_origin('qa', use_local_host=True) == 'https://proxy.internal.com'


def test_helper_modules_exposed_on_package():
    import hubspot_cli_lib

    assert hubspot_cli_lib.urls is urls
    for name in ('files', 'sandboxes', 'table', 'urls'):
        assert name in hubspot_cli_lib.__all__
        assert hasattr(hubspot_cli_lib, name)
