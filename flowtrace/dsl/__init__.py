"""Network definition loading (YAML/JSON with schema validation)."""

from flowtrace.dsl.loader import load_network_file, load_network_yaml

__all__ = ["load_network_file", "load_network_yaml"]
