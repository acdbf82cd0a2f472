"""Top-level run of the GitHub CI status plugin."""

import logging
import sys
from typing import Optional, TextIO

from .aggregator import aggregate
from .api_client import GitHubAPIClient
from .config import load_config
from .errors import GithubCIError
from .finder import find_pull_requests
from .output import render, render_empty, render_error


def build_output(config_path: Optional[str] = None, client: GitHubAPIClient = None) -> str:
    """Run the whole pipeline and return the text for the status bar.

    Every plugin error is turned into the warning output; nothing escapes.
    """
    title = ''
    try:
        config = load_config(config_path)
        title = config.title
        client = client or GitHubAPIClient(config)

        summaries = find_pull_requests(config, client)
        if not summaries:
            return render_empty()

        result = aggregate(config, summaries, client)
        return render(title, result.state, result.lines)
    except GithubCIError as e:
        logging.debug(f"Run aborted: {e}", exc_info=True)
        return render_error(title, e.message)


def run(config_path: Optional[str] = None, client: GitHubAPIClient = None,
        stream: TextIO = None) -> int:
    """Write the status summary to stream (stdout by default).

    Returns:
        Process exit code, 0 on every path
    """
    stream = stream or sys.stdout
    stream.write(build_output(config_path, client))
    stream.flush()
    return 0
