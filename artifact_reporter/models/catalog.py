from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .artifact import Artifact
from .run_context import RunContext


@dataclass(frozen=True)
class Catalog:
    artifacts: tuple[Artifact, ...]
    by_name: MappingProxyType[str, Artifact]
    selected: Artifact | None
    context: RunContext
    queried_name: str | None = None

    def is_empty(self) -> bool:
        return not self.artifacts


@dataclass(frozen=True)
class RenderContext:
    """Values a report template can reference.

    Template names keep the camelCase spelling users write in workflow files:
    ``artifact``, ``context``, ``queriedArtifactName``, ``list`` and ``byName``.
    Every field is always present; unset optional values render as an empty
    string while any lookup through them is rejected by strict rendering.
    """

    artifact: Artifact | None
    context: RunContext
    queried_artifact_name: str | None
    artifacts: tuple[Artifact, ...]
    by_name: MappingProxyType[str, Artifact]

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "RenderContext":
        return cls(
            artifact=catalog.selected,
            context=catalog.context,
            queried_artifact_name=catalog.queried_name,
            artifacts=catalog.artifacts,
            by_name=catalog.by_name,
        )

    def as_namespace(self) -> dict[str, Any]:
        return {
            "artifact": self.artifact,
            "context": self.context,
            "queriedArtifactName": self.queried_artifact_name,
            "list": self.artifacts,
            "byName": self.by_name,
        }
