from io import StringIO
from typing import Any

from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    yaml = YAML(typ="rt")
    yaml.default_flow_style = False
    yaml.explicit_start = False
    yaml.preserve_quotes = True
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=2, offset=0)
    return yaml

def load_yaml_text(text: str) -> Any:
    return get_yaml_instance().load(StringIO(text))
