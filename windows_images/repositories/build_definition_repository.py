import os
from typing import Any

from ruamel.yaml import YAML
from windows_images.models import BuildDefinitionFile, ServiceDefinition
from windows_images.utils.yaml_loader import get_yaml_instance


def parse_build_definition(data: Any) -> BuildDefinitionFile:
    if not data or "services" not in data:
        raise ValueError("Invalid build definition: missing 'services'")
    try:
        return BuildDefinitionFile(services=[
            ServiceDefinition(name=name, image=body.get("image"), build=body.get("build"))
            for name, body in data["services"].items()
        ])
    except Exception as e:
        raise ValueError(f"Invalid build definition: {e}") from e


class BuildDefinitionRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[ServiceDefinition]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
        return parse_build_definition(data).services

    def variant_ids(self) -> set[str]:
        return {s.name for s in self.find_all()}
