import json
from dataclasses import asdict
from enum import StrEnum
from pydantic.dataclasses import dataclass

from .artifact import Artifact
from .catalog import Catalog

class ReportMode(StrEnum):
    COMMIT_STATUS = "commit_status"
    PULL_REQUEST = "pull_request"
    NONE = "none"

@dataclass(frozen=True)
class ReportFields:
    context: str
    message: str
    state: str
    target_url: str

@dataclass(frozen=True)
class ReportOutputs:
    artifact_id: str
    artifact_url: str
    artifact_list: str

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "ReportOutputs":
        selected: Artifact | None = catalog.selected
        return cls(
            artifact_id=str(selected.id) if selected else "",
            artifact_url=selected.url if selected else "",
            artifact_list=json.dumps([asdict(a) for a in catalog.artifacts], separators=(",", ":")),
        )

    def items(self) -> list[tuple[str, str]]:
        return [
            ("artifact_id", self.artifact_id),
            ("artifact_url", self.artifact_url),
            ("artifact_list", self.artifact_list),
        ]
