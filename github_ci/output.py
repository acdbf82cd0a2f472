"""Rendering of the status summary in the BitBar text format."""

from typing import List

from .errors import UnknownStateError
from .models import FAILURE, PENDING, SUCCESS, WARNING

STATUS_ICONS = {
    FAILURE: '🆘',
    PENDING: '🔄',
    SUCCESS: '✅',
    WARNING: '⚠️',
}

STATUS_LINE = '{icon} {label}|href={url}'
SEPARATOR = '---'
NO_PULL_REQUESTS = 'No Pull Requests. Get to work!'


def status_icon(state: str) -> str:
    """Icon for a state. Unknown states raise rather than render blank."""
    try:
        return STATUS_ICONS[state]
    except KeyError:
        raise UnknownStateError(state) from None


def status_line(state: str, label: str, url: str) -> str:
    return STATUS_LINE.format(icon=status_icon(state), label=label, url=url)


def check_line(state: str, context: str, url: str) -> str:
    """Indented line for a single check under its pull request."""
    return '--' + status_line(state, context, url)


def render(title: str, overall_state: str, lines: List[str]) -> str:
    """Render the header, separator and one line per entry.

    An empty line list means no pull requests were found.
    """
    if not lines:
        return render_empty()
    header = f"{title} {status_icon(overall_state)}"
    return '\n'.join([header, SEPARATOR] + list(lines)) + '\n'


def render_empty() -> str:
    return NO_PULL_REQUESTS + '\n'


def render_error(title: str, message: str) -> str:
    return f"{title} {STATUS_ICONS[WARNING]}\n{SEPARATOR}\n{message}\n"
