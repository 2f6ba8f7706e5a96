from .action_input import ActionInput
from .artifact import Artifact, RawArtifact
from .catalog import Catalog, RenderContext
from .config import ReporterConfig
from .report import ReportFields, ReportMode, ReportOutputs
from .run_context import RunContext
from .workflow_run import PullRequestRef, WorkflowRun

__all__ = [
    "ActionInput",
    "Artifact",
    "RawArtifact",
    "Catalog",
    "RenderContext",
    "ReporterConfig",
    "ReportFields",
    "ReportMode",
    "ReportOutputs",
    "RunContext",
    "PullRequestRef",
    "WorkflowRun",
]
