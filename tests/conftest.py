import pytest

from .helpers import FakeGitHubClient


@pytest.fixture
def templates_client() -> FakeGitHubClient:
    return FakeGitHubClient(
        listings={
            'templates': [
                {'path': 'templates/a.html', 'type': 'file', 'download_url': 'https://x/a'},
                {'path': 'templates/sub', 'type': 'dir', 'download_url': None},
            ],
            'templates/sub': [
                {'path': 'templates/sub/b.css', 'type': 'file', 'download_url': 'https://x/b'},
            ],
        },
        downloads={
            'https://x/a': b'<h1>a</h1>',
            'https://x/b': b'body { color: red; }',
        },
    )
