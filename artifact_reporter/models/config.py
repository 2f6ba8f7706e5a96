import os
from typing import Mapping
from pydantic.dataclasses import dataclass

from .action_input import ActionInput
from .report import ReportFields

INPUT_NAMES = (
    "github-token",
    "artifact-name",
    "report-on",
    "context",
    "message",
    "state",
    "target-url",
    "ignore-empty",
)

@dataclass(frozen=True)
class ReporterConfig:
    github_token: str
    artifact_name: str | None
    report_on: str
    fields: ReportFields
    ignore_empty: bool = False

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, str]) -> "ReporterConfig":
        return cls(
            github_token=inputs.get("github-token", ""),
            artifact_name=inputs.get("artifact-name") or None,
            report_on=inputs.get("report-on", ""),
            fields=ReportFields(
                context=inputs.get("context", ""),
                message=inputs.get("message", ""),
                state=inputs.get("state", ""),
                target_url=inputs.get("target-url", ""),
            ),
            ignore_empty=inputs.get("ignore-empty", "") == "true",
        )

    @classmethod
    def from_env(
        cls,
        declared: list[ActionInput] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ReporterConfig":
        environ = os.environ if environ is None else environ
        by_name = {i.name: i for i in declared or []}
        inputs: dict[str, str] = {}
        for name in INPUT_NAMES:
            spec = by_name.get(name, ActionInput(name=name))
            inputs[name] = environ.get(spec.env_name, spec.runtime_default()).strip()
        return cls.from_inputs(inputs)
