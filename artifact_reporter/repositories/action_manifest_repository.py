import os
from ruamel.yaml import YAML
from artifact_reporter.models import ActionInput
from artifact_reporter.utils.yaml_loader import get_yaml_instance


class ActionManifestRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_inputs(self) -> list[ActionInput]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
        try:
            inputs = data.get("inputs") or {}
            return [
                ActionInput(
                    name=name,
                    description=str(spec.get("description", "")),
                    required=bool(spec.get("required", False)),
                    default=None if spec.get("default") is None else str(spec["default"]),
                )
                for name, spec in inputs.items()
            ]
        except Exception as e:
            raise ValueError(f"Invalid action.yml structure: {e}") from e
