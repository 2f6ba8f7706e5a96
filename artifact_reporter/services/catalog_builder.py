from dataclasses import replace
from types import MappingProxyType

from artifact_reporter.errors import ArtifactNotFoundError
from artifact_reporter.models import Artifact, Catalog, RawArtifact, RunContext


def to_artifact(raw: RawArtifact, context: RunContext) -> Artifact:
    return Artifact(
        id=raw.id,
        name=raw.name,
        url=context.artifact_url(raw.id),
        commit=context.sha,
    )


def index_by_name(artifacts: tuple[Artifact, ...]) -> MappingProxyType[str, Artifact]:
    # duplicate names: the later artifact replaces the earlier one
    by_name: dict[str, Artifact] = {}
    for artifact in artifacts:
        by_name[artifact.name] = artifact
    return MappingProxyType(by_name)


def find_artifact(artifacts: tuple[Artifact, ...], name: str | None) -> Artifact | None:
    if not name:
        return None
    match = next((a for a in artifacts if a.name == name), None)
    if match is None:
        raise ArtifactNotFoundError(name)
    return replace(match)


def build_catalog(
    raw_artifacts: list[RawArtifact],
    context: RunContext,
    queried_name: str | None = None,
) -> Catalog:
    """Turn the artifact list of a run into a catalog.

    Upstream order is preserved. When ``queried_name`` is given the first
    artifact with exactly that name is selected, and a missing one raises
    ArtifactNotFoundError; an empty list with no query is a valid, empty
    catalog.
    """
    artifacts = tuple(to_artifact(raw, context) for raw in raw_artifacts)
    return Catalog(
        artifacts=artifacts,
        by_name=index_by_name(artifacts),
        selected=find_artifact(artifacts, queried_name),
        context=context,
        queried_name=queried_name or None,
    )
