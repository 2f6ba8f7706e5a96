import logging

from artifact_reporter.clients.github_client import GitHubClient
from artifact_reporter.errors import InvalidOptionError, NoPullRequestError
from artifact_reporter.models import RenderContext, ReportFields, ReportMode, WorkflowRun
from artifact_reporter.services.template_renderer import TemplateRenderer
from artifact_reporter.utils.logging import setup_logger


class ReportDispatcher:
    """Sends the rendered report to the sink selected by ``report-on``.

    At most one write is made per dispatch. Only the fields used by the
    selected mode are rendered, and all of them are rendered before the write.
    """

    def __init__(self, github: GitHubClient, renderer: TemplateRenderer, dry_run: bool = False):
        self.github: GitHubClient = github
        self.renderer: TemplateRenderer = renderer
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("ReportDispatcher")

    def dispatch(
        self,
        report_on: str,
        fields: ReportFields,
        render_context: RenderContext,
        run: WorkflowRun,
    ) -> None:
        context = render_context.context
        match report_on:
            case ReportMode.COMMIT_STATUS:
                state = self.renderer.render(fields.state, render_context)
                target_url = self.renderer.render(fields.target_url, render_context)
                description = self.renderer.render(fields.message, render_context)
                status_context = self.renderer.render(fields.context, render_context)
                if self.dry_run:
                    self.logger.info(f"Dry run mode. Status {state!r} ({status_context}) has not been set on {context.sha}")
                    return
                self.github.create_commit_status(
                    context.owner,
                    context.repo,
                    context.sha,
                    state=state,
                    target_url=target_url,
                    description=description,
                    context=status_context,
                )
                self.logger.info(f"Set status {state!r} ({status_context}) on {context.sha}")
            case ReportMode.PULL_REQUEST:
                if not run.pull_requests:
                    raise NoPullRequestError()
                number = run.pull_requests[0].number
                body = self.renderer.render(fields.message, render_context)
                if self.dry_run:
                    self.logger.info(f"Dry run mode. Comment on pull request #{number} has not been created")
                    return
                self.github.create_issue_comment(context.owner, context.repo, number, body)
                self.logger.info(f"Commented on pull request #{number}")
            case ReportMode.NONE:
                self.logger.info("Reporting is disabled")
            case _:
                raise InvalidOptionError(report_on)
