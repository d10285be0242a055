"""YAML loader + schema validation for network definitions.

Parses a YAML (or JSON) document, rejects YAML key quirks, validates it
against the packaged JSON schema and builds a ``FlowNetwork``.

Example document::

    source: s
    sink: t
    nodes:
      - {id: s, label: Source}
      - a
      - {id: t, label: Sink}
    edges:
      - {from: s, to: a, capacity: 10}
      - {from: a, to: t, capacity: 4}
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema
import yaml

from flowtrace.logging import get_logger
from flowtrace.model.network import FlowNetwork

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def network_schema() -> Dict[str, Any]:
    """Return the packaged network JSON schema."""
    with (
        resources.files("flowtrace.schemas")
        .joinpath("network.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _check_node_keys(nodes: Any) -> None:
    """Reject mapping-layout node ids that YAML parsed as non-strings.

    Unquoted keys such as ``yes`` or ``1`` load as ``True``/``1``; edges can
    only name string ids, so such a node could never be connected.
    """
    if not isinstance(nodes, dict):
        return
    for key in nodes:
        if not isinstance(key, str):
            logger.error("Network definition has a non-string node id: %r", key)
            raise ValueError(
                f"Invalid network definition at 'nodes': node id {key!r} is a "
                f"{type(key).__name__}, not a string; quote it in YAML"
            )


def _canonical_nodes(nodes: Any) -> List[Dict[str, Any]]:
    """Turn either accepted node layout into a list of ``{id, label, attrs}``."""
    if isinstance(nodes, dict):
        entries = []
        for node_id, body in nodes.items():
            body = body or {}
            entries.append({"id": node_id, **body})
        return entries
    return [entry if isinstance(entry, dict) else {"id": entry} for entry in nodes]


def _integral(value: Any) -> Any:
    # JSON Schema treats 4.0 as an integer; the model wants a real int
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def load_network_dict(data: Any) -> Dict[str, Any]:
    """Validate a parsed document and return its canonical dictionary.

    Raises:
        ValueError: If the document is not a mapping or violates the schema.
    """
    if not isinstance(data, dict):
        raise ValueError("The network definition must be a mapping at top-level.")

    _check_node_keys(data.get("nodes"))
    try:
        jsonschema.validate(data, network_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        logger.error("Network definition failed schema validation at %s", location)
        raise ValueError(
            f"Invalid network definition at '{location}': {exc.message}"
        ) from exc

    return {
        "source": data["source"],
        "sink": data["sink"],
        "nodes": _canonical_nodes(data["nodes"]),
        "edges": [
            {"from": e["from"], "to": e["to"], "capacity": _integral(e["capacity"])}
            for e in data["edges"]
        ],
    }


def load_network_yaml(yaml_str: str) -> FlowNetwork:
    """Parse, validate and build a network from YAML text.

    Raises:
        ValueError: On YAML syntax or schema errors.
        ValidationError: On semantic errors (unknown nodes, negative capacity,
            self-loops, duplicate edges, bad source/sink).
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise ValueError(f"Network definition is not valid YAML: {exc}") from exc
    if data is None:
        data = {}
    return FlowNetwork.from_dict(load_network_dict(data))


def load_network_file(path: Union[str, Path]) -> FlowNetwork:
    """Load a network definition from a ``.yaml``/``.yml``/``.json`` file."""
    path = Path(path)
    network = load_network_yaml(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %r from %s", network, path)
    return network
