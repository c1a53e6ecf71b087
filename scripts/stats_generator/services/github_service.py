#------------------------------------------------------------
#                      github_service.py
#           Provides repository records, either from the
#             GitHub API or from a fixed mock fixture.

from typing import Dict, List, Union
import requests
from ..config import (
    ENV_GITHUB_USER,
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_USER_AGENT,
)
from ..errors import ConfigurationError, ParseError, RemoteFetchError
from ..models import StatsConfig

USER_REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
REPO_QUERY_TEMPLATE = "{base}?per_page={per_page}"

FETCHING_MESSAGE = "Fetching repos for user: {username}..."
FOUND_MESSAGE = "Found {count} repositories."
MOCK_MESSAGE = "Using mock data ({count} repositories)."
MISSING_USER_MESSAGE = "{env} environment variable is required."
INVALID_JSON_MESSAGE = "Repository listing is not valid JSON: {error}"
UNEXPECTED_PAYLOAD_MESSAGE = "Expected a list of repositories, got {kind}"
UNEXPECTED_RECORD_MESSAGE = "Expected repository object at index {index}, got {kind}"

MOCK_REPOS = (
    {"language": "JavaScript"}, {"language": "JavaScript"}, {"language": "JavaScript"},
    {"language": "TypeScript"}, {"language": "TypeScript"},
    {"language": "Python"}, {"language": "Python"},
    {"language": "HTML"}, {"language": "CSS"},
    {"language": "PHP"}, {"language": "PHP"},
    {"language": "Ruby"}, {"language": "Ruby"}, {"language": "Ruby"}, {"language": "Ruby"},
)

class MockRepositorySource:

    # Returns fresh copies so callers can never mutate the fixture.
    def fetch_repos(self) -> List[dict]:
        repos = [dict(repo) for repo in MOCK_REPOS]
        print(MOCK_MESSAGE.format(count=len(repos)))
        return repos

class GitHubService:

    def __init__(self, config: StatsConfig):
        self.config = config

    # This function does build request headers for GitHub API calls.
    # It adds auth headers when a token is configured.
    def headers(self) -> Dict[str, str]:
        headers = {
            "Accept": GITHUB_API_ACCEPT_HEADER,
            "User-Agent": GITHUB_USER_AGENT,
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    def repos_url(self) -> str:
        base_url = f"{GITHUB_API_BASE_URL}{USER_REPOS_ENDPOINT_TEMPLATE.format(username=self.config.github_user)}"
        return REPO_QUERY_TEMPLATE.format(base=base_url, per_page=GITHUB_REPOS_PER_PAGE)

    # This function does fetch the user's repositories from GitHub.
    # Only the first page of 100 is requested; later pages are not fetched.
    def fetch_repos(self) -> List[dict]:
        if not self.config.github_user:
            raise ConfigurationError(MISSING_USER_MESSAGE.format(env=ENV_GITHUB_USER))

        print(FETCHING_MESSAGE.format(username=self.config.github_user))
        response = requests.get(self.repos_url(), headers=self.headers())
        if not response.ok:
            raise RemoteFetchError(response.status_code, response.reason)

        repos = self._parse_repos(response)
        print(FOUND_MESSAGE.format(count=len(repos)))
        return repos

    @staticmethod
    def _parse_repos(response: requests.Response) -> List[dict]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ParseError(INVALID_JSON_MESSAGE.format(error=exc)) from exc

        if not isinstance(data, list):
            raise ParseError(UNEXPECTED_PAYLOAD_MESSAGE.format(kind=type(data).__name__))
        for index, repo in enumerate(data):
            if not isinstance(repo, dict):
                raise ParseError(UNEXPECTED_RECORD_MESSAGE.format(index=index, kind=type(repo).__name__))
        return data

# This function does pick the repository source for this run.
def build_repository_source(config: StatsConfig) -> Union[GitHubService, MockRepositorySource]:
    if config.mock_data:
        return MockRepositorySource()
    return GitHubService(config)
