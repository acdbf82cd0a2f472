"""Fold pull request CI statuses into display lines and an overall state."""

import logging
from typing import List

from .api_client import GitHubAPIClient
from .models import CommitStatus, Config, PullRequest, PullRequestSummary, RunResult
from .output import check_line, status_line


def fetch_pull_request(client: GitHubAPIClient, repo: str, number: int) -> PullRequest:
    return PullRequest.from_json(repo, number, client.get_pull_request(repo, number))


def fetch_commit_status(client: GitHubAPIClient, repo: str, sha: str) -> CommitStatus:
    return CommitStatus.from_json(client.get_commit_status(repo, sha))


def aggregate(config: Config, summaries: List[PullRequestSummary],
              client: GitHubAPIClient = None) -> RunResult:
    """Fetch detail and status for each pull request, in the given order.

    The overall state locks to the first pull request whose state differs
    from success. Any error aborts the whole pass.

    Args:
        config: Plugin configuration
        summaries: Pull requests as returned by the finder
        client: API client (created from the config when omitted)

    Returns:
        RunResult with one header line per pull request, each followed by
        one line per check
    """
    client = client or GitHubAPIClient(config)
    result = RunResult()

    for summary in summaries:
        repo = summary.repo_name(config.base_uri)
        pr = fetch_pull_request(client, repo, summary.number)
        status = fetch_commit_status(client, repo, pr.head_sha)

        result.lines.append(status_line(status.state, pr.title, pr.html_url))

        if result.overall.observe(status.state):
            logging.debug(f"Overall state locked to '{status.state}' by {repo}#{pr.number}")

        for check in status.checks:
            result.lines.append(check_line(check.state, check.context, check.target_url))

    return result
