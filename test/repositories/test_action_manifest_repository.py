import os
import pytest

from artifact_reporter.models.config import INPUT_NAMES
from artifact_reporter.repositories import ActionManifestRepository

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))


def test_action_manifest_declares_every_input():
    repo = ActionManifestRepository(os.path.join(ROOT_DIR, "action.yml"))
    inputs = {i.name: i for i in repo.find_inputs()}

    assert set(inputs) == set(INPUT_NAMES)
    assert inputs["report-on"].default == "commit_status"
    assert inputs["artifact-name"].default is None
    assert inputs["github-token"].runtime_default() == ""


def test_missing_manifest_returns_no_inputs(tmp_path):
    repo = ActionManifestRepository(str(tmp_path / "action.yml"))
    assert repo.find_inputs() == []


def test_invalid_manifest_structure(tmp_path):
    bad_file = tmp_path / "action.yml"
    bad_file.write_text("inputs:\n  - github-token\n")

    repo = ActionManifestRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid action.yml structure"):
        repo.find_inputs()
