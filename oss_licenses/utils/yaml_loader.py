from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    # every scalar stays a string, so versions like 1.0 or 1.10 are read verbatim
    yaml = YAML(typ="base")
    yaml.default_flow_style = False
    yaml.width = 4096
    return yaml
