"""GitHub REST access shared by the catalog CI utilities."""

from .http_client import GitHubAPIError, get_json, github_request, paged_get

__all__ = ["GitHubAPIError", "get_json", "github_request", "paged_get"]
