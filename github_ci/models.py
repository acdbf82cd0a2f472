"""Data models for GitHub CI status reporting."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import ResponseError

SUCCESS = 'success'
FAILURE = 'failure'
PENDING = 'pending'
WARNING = 'warning'  # only ever produced locally


@dataclass(frozen=True)
class Config:
    """Plugin settings, loaded once per run."""
    username: str
    access_token: str = field(repr=False)
    repos: Tuple[str, ...]
    hostname: str = 'github.com'
    title: str = ''
    timeout: float = 10.0

    @property
    def base_uri(self) -> str:
        return f"https://{self.hostname}/api/v3/"


def _require(data: Dict, key: str, what: str, kind: type = str):
    """Fetch a key from an API payload.

    Raises ResponseError when the key is absent or its value is not of kind.
    """
    if not isinstance(data, dict) or key not in data:
        raise ResponseError(f"Unexpected response from the Github API: {what} has no '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ResponseError(f"Unexpected response from the Github API: {what} '{key}' is not a {kind.__name__}")
    return value


@dataclass
class PullRequestSummary:
    """A pull request as returned by the issue search."""
    repository_url: str
    number: int

    @classmethod
    def from_json(cls, item: Dict) -> 'PullRequestSummary':
        return cls(
            repository_url=_require(item, 'repository_url', 'search item'),
            number=_require(item, 'number', 'search item', int),
        )

    def repo_name(self, base_uri: str) -> str:
        """Strip the API prefix from the repository URL, leaving owner/name."""
        prefix = base_uri + 'repos/'
        if self.repository_url.startswith(prefix):
            return self.repository_url[len(prefix):]
        # api.github.com does not live under /api/v3/
        _, sep, repo = self.repository_url.rpartition('/repos/')
        if not sep:
            raise ResponseError(f"Unexpected repository URL: {self.repository_url}")
        return repo


@dataclass
class PullRequest:
    """Full pull request detail."""
    repo: str
    number: int
    title: str
    html_url: str
    head_sha: str

    @classmethod
    def from_json(cls, repo: str, number: int, data: Dict) -> 'PullRequest':
        head = _require(data, 'head', 'pull request', dict)
        return cls(
            repo=repo,
            number=number,
            title=_require(data, 'title', 'pull request'),
            html_url=_require(data, 'html_url', 'pull request'),
            head_sha=_require(head, 'sha', 'pull request head'),
        )


@dataclass
class Check:
    """A single CI check reported against a commit."""
    state: str
    context: str
    target_url: str

    @classmethod
    def from_json(cls, data: Dict) -> 'Check':
        return cls(
            state=_require(data, 'state', 'status check'),
            context=_require(data, 'context', 'status check'),
            target_url=data.get('target_url') or '',  # null when the check has no link
        )


@dataclass
class CommitStatus:
    """Combined status of a commit."""
    state: str
    checks: List[Check] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict) -> 'CommitStatus':
        statuses = _require(data, 'statuses', 'commit status', list)
        return cls(
            state=_require(data, 'state', 'commit status'),
            checks=[Check.from_json(s) for s in statuses],
        )


@dataclass
class OverallState:
    """Top-level state of a run.

    Starts at success and is overwritten at most once, by the first observed
    state that differs from it. Later divergences are ignored.
    """
    state: str = SUCCESS
    locked: bool = False

    def observe(self, state: str) -> bool:
        """Record a pull request's state. Returns True if it was locked in."""
        if self.locked or state == self.state:
            return False
        self.state = state
        self.locked = True
        return True


@dataclass
class RunResult:
    """Overall state plus the display lines built during aggregation."""
    overall: OverallState = field(default_factory=OverallState)
    lines: List[str] = field(default_factory=list)

    @property
    def state(self) -> str:
        return self.overall.state
