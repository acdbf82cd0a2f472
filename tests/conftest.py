"""Shared fixtures for the GitHub CI status tests."""

import pytest
from unittest.mock import Mock

from github_ci.models import Config


BASE_URI = 'https://github.com/api/v3/'


@pytest.fixture
def config():
    """Config for user alice watching one repository."""
    return Config(username='alice', access_token='secret', repos=('org/repo1',))


def make_response(status_code=200, json_data=None, content=b'{}'):
    """Build a mocked requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.json.return_value = json_data
    response.raise_for_status.return_value = None
    return response


def make_client(pulls, statuses):
    """Mock API client serving pull request details and commit statuses.

    Args:
        pulls: Mapping of (repo, number) -> pull request JSON
        statuses: Mapping of (repo, sha) -> commit status JSON
    """
    client = Mock()
    client.get_pull_request.side_effect = lambda repo, number: pulls[(repo, number)]
    client.get_commit_status.side_effect = lambda repo, sha: statuses[(repo, sha)]
    return client
