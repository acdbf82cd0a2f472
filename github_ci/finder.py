"""Search for the user's open pull requests."""

import logging
from typing import List

from .api_client import GitHubAPIClient
from .models import Config, PullRequestSummary


def build_search_query(config: Config) -> str:
    """Build the issue search query, one repo clause per configured repo."""
    query = f"state:open author:{config.username}"
    for repo in config.repos:
        query += f" repo:{repo}"
    return query


def find_pull_requests(config: Config, client: GitHubAPIClient = None) -> List[PullRequestSummary]:
    """Find open pull requests authored by the configured user.

    Args:
        config: Plugin configuration
        client: API client (created from the config when omitted)

    Returns:
        Summaries in the order the search returned them, empty if none match
    """
    client = client or GitHubAPIClient(config)
    query = build_search_query(config)
    items = client.search_issues(query)
    logging.info(f"Found {len(items)} open pull request(s) for {config.username}")
    return [PullRequestSummary.from_json(item) for item in items]
