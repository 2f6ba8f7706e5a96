from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RawArtifact:
    id: int
    name: str

@dataclass(frozen=True)
class Artifact:
    id: int
    name: str
    url: str
    commit: str
