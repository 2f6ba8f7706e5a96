import pytest

from artifact_reporter.models import ActionInput, ReporterConfig


@pytest.fixture
def declared():
    return [
        ActionInput(name="github-token", default="${{ github.token }}"),
        ActionInput(name="report-on", default="commit_status"),
        ActionInput(name="message", default="{{ list | length }} artifacts available"),
        ActionInput(name="ignore-empty", default="false"),
    ]


def test_from_env_reads_runner_inputs(declared):
    environ = {
        "INPUT_GITHUB-TOKEN": "secret",
        "INPUT_ARTIFACT-NAME": " build ",
        "INPUT_REPORT-ON": "pull_request",
        "INPUT_TARGET-URL": "{{ artifact.url }}",
        "INPUT_IGNORE-EMPTY": "true",
    }
    config = ReporterConfig.from_env(declared, environ)

    assert config.github_token == "secret"
    assert config.artifact_name == "build"
    assert config.report_on == "pull_request"
    assert config.fields.target_url == "{{ artifact.url }}"
    assert config.ignore_empty is True


def test_from_env_falls_back_to_declared_defaults(declared):
    config = ReporterConfig.from_env(declared, {})

    assert config.github_token == ""
    assert config.artifact_name is None
    assert config.report_on == "commit_status"
    assert config.fields.message == "{{ list | length }} artifacts available"
    assert config.fields.context == ""
    assert config.ignore_empty is False


@pytest.mark.parametrize("value,expected", [("true", True), ("True", False), ("1", False), ("yes", False), ("", False)])
def test_ignore_empty_only_accepts_literal_true(value, expected):
    config = ReporterConfig.from_inputs({"ignore-empty": value})
    assert config.ignore_empty is expected


def test_empty_artifact_name_is_absent():
    assert ReporterConfig.from_inputs({"artifact-name": ""}).artifact_name is None


def test_env_name_keeps_hyphens():
    assert ActionInput(name="target-url").env_name == "INPUT_TARGET-URL"
