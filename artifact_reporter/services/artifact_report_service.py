import logging
from typing import Any

from typing_extensions import override

from artifact_reporter.clients.github_client import GitHubClient
from artifact_reporter.errors import PreconditionError
from artifact_reporter.models import RenderContext, ReporterConfig, ReportOutputs, RunContext, WorkflowRun
from artifact_reporter.services.catalog_builder import build_catalog
from artifact_reporter.services.report_dispatcher import ReportDispatcher
from artifact_reporter.services.service import Service
from artifact_reporter.services.template_renderer import TemplateRenderer
from artifact_reporter.utils.logging import setup_logger


class ArtifactReportService(Service):
    def __init__(self, config: ReporterConfig, repository: str, event: dict[str, Any], dry_run: bool = False):
        self.config: ReporterConfig = config
        self.repository: str = repository
        self.event: dict[str, Any] = event
        self.github: GitHubClient = GitHubClient(config.github_token)
        self.dispatcher: ReportDispatcher = ReportDispatcher(self.github, TemplateRenderer(), dry_run)
        self.logger: logging.Logger = setup_logger("ArtifactReportService")

    @override
    def run(self) -> ReportOutputs | None:
        run = self.workflow_run()
        owner, repo = self.owner_and_repo()
        self.logger.info(f"Reporting artifacts of workflow run {run.id} in {owner}/{repo}")

        raw_artifacts = self.github.list_artifacts(owner, repo, run.id)
        self.logger.info(f"Found {len(raw_artifacts)} artifacts")
        catalog = build_catalog(
            raw_artifacts,
            RunContext(owner=owner, repo=repo, check_suite_id=run.check_suite_id, sha=run.head_sha),
            self.config.artifact_name,
        )
        if catalog.selected:
            self.logger.info(f"Selected artifact {catalog.selected.name} ({catalog.selected.id})")

        if self.config.ignore_empty and catalog.is_empty():
            self.logger.info("Ignoring run because list of artifacts is empty and ignore-empty is 'true'")
            return None

        self.dispatcher.dispatch(
            self.config.report_on,
            self.config.fields,
            RenderContext.from_catalog(catalog),
            run,
        )
        return ReportOutputs.from_catalog(catalog)

    def workflow_run(self) -> WorkflowRun:
        payload = self.event.get("workflow_run")
        if not payload:
            raise PreconditionError(
                "This action must run on workflow that runs on: workflow_run, so it can get the artifact list properly"
            )
        try:
            return WorkflowRun(
                id=payload["id"],
                check_suite_id=payload["check_suite_id"],
                head_sha=payload["head_sha"],
                pull_requests=[{"number": pr["number"]} for pr in payload.get("pull_requests") or []],
            )
        except Exception as e:
            raise PreconditionError(f"Invalid workflow_run payload: {e}") from e

    def owner_and_repo(self) -> tuple[str, str]:
        owner, _, repo = self.repository.partition("/")
        if not owner or not repo:
            raise PreconditionError(f"Invalid repository {self.repository!r}, expected owner/repo")
        return owner, repo
