"""GitHub API client for the three endpoints the plugin reads."""

import logging
from typing import Dict, List

import requests

from .errors import ResponseError, TransportError
from .models import Config

REQUEST_FAILED = "Error making request to the Github API. Check your configuration."


class GitHubAPIClient:
    """Makes single-attempt GET requests against the GitHub REST API."""

    def __init__(self, config: Config):
        """Initialize the GitHub API client.

        Args:
            config: Plugin configuration (base URI, token and timeout)
        """
        self.base_uri = config.base_uri
        self.token = config.access_token
        self.timeout = config.timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github.v3+json'
        })

    def get(self, endpoint: str, params: Dict = None):
        """Make a GET request and decode the JSON body.

        Args:
            endpoint: Path relative to the API base URI
            params: Query parameters (the access token is added)

        Returns:
            Decoded JSON body

        Raises:
            TransportError: If the request fails or yields no body
            ResponseError: If the body is not JSON
        """
        url = self.base_uri + endpoint
        params = dict(params or {})
        params['access_token'] = self.token

        logging.debug(f"GET {url}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logging.debug(f"Request to {url} failed: {e}")
            raise TransportError(REQUEST_FAILED) from e

        if not response.content:
            raise TransportError(REQUEST_FAILED)

        try:
            return response.json()
        except ValueError as e:
            raise ResponseError(f"Invalid JSON from the Github API: {url}") from e

    def search_issues(self, query: str) -> List[Dict]:
        """Run an issue search and return its items."""
        data = self.get('search/issues', {'q': query})
        if not isinstance(data, dict) or not isinstance(data.get('items'), list):
            raise ResponseError("Unexpected response from the Github API: search has no 'items'")
        return data['items']

    def get_pull_request(self, repo: str, number: int) -> Dict:
        return self.get(f"repos/{repo}/pulls/{number}")

    def get_commit_status(self, repo: str, sha: str) -> Dict:
        return self.get(f"repos/{repo}/commits/{sha}/status")
