#!/usr/bin/env python3
# <bitbar.title>Github CI Status</bitbar.title>
# <bitbar.version>v1.0</bitbar.version>
# <bitbar.author>Jordan Andree</bitbar.author>
# <bitbar.author.github>jordanandree</bitbar.author.github>
# <bitbar.desc>Displays Github Pull Request CI Check statuses</bitbar.desc>
# <bitbar.dependencies>python3,requests,python-dotenv</bitbar.dependencies>
# <bitbar.abouturl>https://github.com/jordanandree/bitbar-github-ci</bitbar.abouturl>
"""
GitHub CI Status
Shows the CI checks of your open pull requests in the menu bar.
"""

import os
import sys
import logging
from dotenv import load_dotenv

from github_ci.plugin import run

# stdout belongs to BitBar, so logs go to stderr and stay quiet by default
log_level = os.environ.get('LOG_LEVEL', 'WARNING').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.WARNING),
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%m/%d/%Y %I:%M:%S %p',
    stream=sys.stderr
)


def main():
    """Main entry point for the plugin."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    sys.exit(run())


if __name__ == "__main__":
    main()
