from pydantic.dataclasses import dataclass

ARTIFACT_URL_TEMPLATE = "https://github.com/{owner}/{repo}/suites/{check_suite_id}/artifacts/{id}"

@dataclass(frozen=True)
class RunContext:
    owner: str
    repo: str
    check_suite_id: int
    sha: str

    def artifact_url(self, artifact_id: int) -> str:
        return ARTIFACT_URL_TEMPLATE.format(
            owner=self.owner,
            repo=self.repo,
            check_suite_id=self.check_suite_id,
            id=artifact_id,
        )
