"""
Configuration loading for the GitHub CI status plugin.

Settings live in the ``[github_ci]`` section of ``~/.bitbarrc``, the file
BitBar plugins conventionally share. Example::

    [github_ci]
    hostname = github.example.com
    title = CI
    username = alice
    access_token = 0123456789abcdef
    repos = org/repo1, org/repo2
"""

import configparser
import logging
import math
import os
import re
from typing import Optional

from .errors import ConfigError
from .models import Config

CONFIG_SECTION = 'github_ci'
DEFAULT_CONFIG_FILE = '~/.bitbarrc'

DEFAULTS = {
    'hostname': 'github.com',
    'title': '',
}

REQUIRED_KEYS = ('username', 'access_token', 'repos')


def default_config_path() -> str:
    """Config path, overridable through the BITBARRC environment variable."""
    return os.environ.get('BITBARRC', DEFAULT_CONFIG_FILE)


def parse_repos(value: str) -> tuple:
    """Split a repos value on commas and whitespace, keeping order."""
    return tuple(r for r in re.split(r'[\s,]+', value) if r)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and validate the plugin configuration.

    Args:
        config_path: Path to the INI file (defaults to ~/.bitbarrc)

    Returns:
        Immutable Config

    Raises:
        ConfigError: If the file, the section or a required key is missing
    """
    display_path = config_path or default_config_path()
    path = os.path.expanduser(display_path)

    if not os.path.exists(path):
        raise ConfigError(f"{display_path} is missing")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            parser.read_file(f)
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{display_path} could not be parsed: {e}") from e

    if not parser.has_section(CONFIG_SECTION):
        raise ConfigError(f"[{CONFIG_SECTION}] section is missing in {display_path}")

    section = dict(DEFAULTS)
    section.update(parser[CONFIG_SECTION])

    # Let the token live outside the file
    if not section.get('access_token') and os.environ.get('GITHUB_TOKEN'):
        section['access_token'] = os.environ['GITHUB_TOKEN']

    for key in REQUIRED_KEYS:
        if not section.get(key, '').strip():
            raise ConfigError(f"{key} is missing in [{CONFIG_SECTION}] section of {display_path}")

    timeout = Config.timeout
    if section.get('timeout'):
        try:
            timeout = float(section['timeout'])
        except ValueError as e:
            raise ConfigError("timeout must be a number of seconds") from e
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError("timeout must be a number of seconds")

    repos = parse_repos(section['repos'])
    if not repos:
        raise ConfigError(f"repos is missing in [{CONFIG_SECTION}] section of {display_path}")

    config = Config(
        username=section['username'].strip(),
        access_token=section['access_token'].strip(),
        repos=repos,
        hostname=section['hostname'].strip() or DEFAULTS['hostname'],
        title=section['title'],
        timeout=timeout,
    )
    logging.debug(f"Loaded config from {path} with {len(config.repos)} repo(s)")
    return config
