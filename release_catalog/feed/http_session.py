"""HTTP session for talking to the GitHub API."""
import os

import requests

HEADERS = {
    'Accept': 'application/vnd.github+json',
    'User-Agent': 'release-catalog',
    'X-GitHub-Api-Version': '2022-11-28',
}


def create_session(token: str | None = None) -> requests.Session:
    """Create a session with GitHub headers; `token` defaults to the `GITHUB_TOKEN` environment variable."""
    new_session = requests.Session()
    new_session.headers.update(HEADERS)

    token = token or os.getenv('GITHUB_TOKEN')
    if token:
        new_session.headers['Authorization'] = f'Bearer {token}'
    return new_session


# Global session object
session = create_session()
