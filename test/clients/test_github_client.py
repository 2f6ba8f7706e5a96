from unittest.mock import MagicMock
import pytest
import requests
from github import GithubException
from artifact_reporter.clients.github_client import GitHubClient
from artifact_reporter.errors import TransportError
from artifact_reporter.models import RawArtifact

@pytest.fixture
def gh_repo():
    return MagicMock()

@pytest.fixture
def client(monkeypatch, gh_repo):
    client = GitHubClient("fake-token")
    monkeypatch.setattr(client.client, "get_repo", MagicMock(return_value=gh_repo))
    return client

def test_missing_token():
    with pytest.raises(EnvironmentError):
        GitHubClient("")

def test_get_repo_uses_full_name(client):
    client.get_repo("acme", "widgets")
    client.client.get_repo.assert_called_once_with("acme/widgets")

def test_list_artifacts(client, gh_repo):
    first, second = MagicMock(id=1), MagicMock(id=2)
    first.name, second.name = "build", "logs"
    gh_repo.get_workflow_run.return_value.get_artifacts.return_value = iter([first, second])

    artifacts = client.list_artifacts("acme", "widgets", 99)

    gh_repo.get_workflow_run.assert_called_once_with(99)
    assert artifacts == [RawArtifact(id=1, name="build"), RawArtifact(id=2, name="logs")]

def test_list_artifacts_wraps_github_errors(client, gh_repo):
    gh_repo.get_workflow_run.side_effect = GithubException(404, {"message": "Not Found"}, None)
    with pytest.raises(TransportError, match="Failed to list artifacts of run 99") as exc_info:
        client.list_artifacts("acme", "widgets", 99)
    assert isinstance(exc_info.value.__cause__, GithubException)

def test_create_commit_status(client, gh_repo):
    client.create_commit_status("acme", "widgets", "abc123", "success", "https://example.com", "done", "ci")
    gh_repo.get_commit.assert_called_once_with("abc123")
    gh_repo.get_commit.return_value.create_status.assert_called_once_with(
        "success", target_url="https://example.com", description="done", context="ci"
    )

def test_create_commit_status_wraps_github_errors(client, gh_repo):
    gh_repo.get_commit.return_value.create_status.side_effect = GithubException(422, {"message": "bad state"}, None)
    with pytest.raises(TransportError):
        client.create_commit_status("acme", "widgets", "abc123", "weird", "", "", "ci")

def test_create_issue_comment(client, gh_repo):
    client.create_issue_comment("acme", "widgets", 17, "hello")
    gh_repo.get_issue.assert_called_once_with(17)
    gh_repo.get_issue.return_value.create_comment.assert_called_once_with("hello")

@pytest.mark.parametrize("error", [requests.ConnectionError("connection refused"), requests.Timeout("timed out")])
def test_network_errors_are_wrapped(client, gh_repo, error):
    gh_repo.get_issue.side_effect = error
    with pytest.raises(TransportError, match="Failed to comment on #17") as exc_info:
        client.create_issue_comment("acme", "widgets", 17, "hello")
    assert exc_info.value.__cause__ is error
