"""GitHub CI Status - BitBar plugin showing CI checks of your open pull requests."""

from .models import Config, PullRequestSummary, PullRequest, Check, CommitStatus, OverallState, RunResult
from .errors import GithubCIError, ConfigError, TransportError, ResponseError, UnknownStateError
from .api_client import GitHubAPIClient
from .config import load_config
from .finder import find_pull_requests
from .aggregator import aggregate
from .output import render, render_empty, render_error, status_icon
from .plugin import run

__all__ = [
    'Config',
    'PullRequestSummary',
    'PullRequest',
    'Check',
    'CommitStatus',
    'OverallState',
    'RunResult',
    'GithubCIError',
    'ConfigError',
    'TransportError',
    'ResponseError',
    'UnknownStateError',
    'GitHubAPIClient',
    'load_config',
    'find_pull_requests',
    'aggregate',
    'render',
    'render_empty',
    'render_error',
    'status_icon',
    'run',
]
