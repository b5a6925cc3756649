import os
from ruamel.yaml import YAML
from oss_licenses.models import DependencyGraphFile, DependencyScope
from oss_licenses.utils.yaml_loader import get_yaml_instance


class DependencyGraphRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[DependencyScope]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = DependencyGraphFile(**data)
                return parsed.scopes
            except Exception as e:
                raise ValueError(f"Invalid dependency graph file: {e}") from e
