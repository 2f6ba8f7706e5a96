from pydantic import Field
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class PullRequestRef:
    number: int

@dataclass(frozen=True)
class WorkflowRun:
    id: int
    check_suite_id: int
    head_sha: str
    pull_requests: list[PullRequestRef] = Field(default_factory=list)
