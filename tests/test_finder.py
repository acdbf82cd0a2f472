"""
Unit tests for the pull request finder
"""

from unittest.mock import Mock

from github_ci.finder import build_search_query, find_pull_requests
from github_ci.models import Config


class TestBuildSearchQuery:

    def test_single_repo(self, config):
        assert build_search_query(config) == 'state:open author:alice repo:org/repo1'

    def test_repos_in_configured_order(self):
        config = Config(username='bob', access_token='t', repos=('z/last', 'a/first'))
        assert build_search_query(config) == 'state:open author:bob repo:z/last repo:a/first'


class TestFindPullRequests:
    """Test cases for find_pull_requests."""

    def test_returns_summaries_in_order(self, config):
        client = Mock()
        client.search_issues.return_value = [
            {'repository_url': 'https://github.com/api/v3/repos/org/repo1', 'number': 7},
            {'repository_url': 'https://github.com/api/v3/repos/org/repo1', 'number': 3},
        ]

        summaries = find_pull_requests(config, client)

        client.search_issues.assert_called_once_with('state:open author:alice repo:org/repo1')
        assert [s.number for s in summaries] == [7, 3]

    def test_no_matches(self, config):
        """Test that an empty search is not an error."""
        client = Mock()
        client.search_issues.return_value = []
        assert find_pull_requests(config, client) == []
