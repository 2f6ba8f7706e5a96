import logging
import requests
from github import Auth, Github, GithubException
from github.Repository import Repository

from artifact_reporter.errors import TransportError
from artifact_reporter.models import RawArtifact

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, token: str):
        if not token:
            logger.error("A GitHub token is mandatory")
            raise EnvironmentError("Missing GitHub token")
        self.client: Github = Github(auth=Auth.Token(token))

    def get_repo(self, owner: str, repo: str) -> Repository:
        return self.client.get_repo(f"{owner}/{repo}")

    def list_artifacts(self, owner: str, repo: str, run_id: int) -> list[RawArtifact]:
        try:
            run = self.get_repo(owner, repo).get_workflow_run(run_id)
            return [RawArtifact(id=a.id, name=a.name) for a in run.get_artifacts()]
        except (GithubException, requests.RequestException) as e:
            raise TransportError(f"Failed to list artifacts of run {run_id} in {owner}/{repo}: {e}") from e

    def create_commit_status(
        self,
        owner: str,
        repo: str,
        sha: str,
        state: str,
        target_url: str,
        description: str,
        context: str,
    ) -> None:
        try:
            commit = self.get_repo(owner, repo).get_commit(sha)
            commit.create_status(state, target_url=target_url, description=description, context=context)
        except (GithubException, requests.RequestException) as e:
            raise TransportError(f"Failed to set status on {sha} in {owner}/{repo}: {e}") from e

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        try:
            self.get_repo(owner, repo).get_issue(issue_number).create_comment(body)
        except (GithubException, requests.RequestException) as e:
            raise TransportError(f"Failed to comment on #{issue_number} in {owner}/{repo}: {e}") from e
