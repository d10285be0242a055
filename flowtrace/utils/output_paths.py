"""Helpers for composing CLI artifact paths.

Artifacts are named ``<prefix><suffix>`` where the prefix is derived from the
network definition file and the suffix identifies the artifact type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

TRACE_SUFFIX = ".trace.json"


def network_prefix_from_path(network_path: Path) -> str:
    """Return the network file name without its extension."""
    return network_path.stem


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def build_artifact_path(output_dir: Optional[Path], prefix: str, suffix: str) -> Path:
    """Compose ``output_dir / (prefix + suffix)``; CWD when no directory is given."""
    base = output_dir if output_dir is not None else Path.cwd()
    return base / f"{prefix}{suffix}"


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve a user-supplied path against an optional output directory.

    Absolute paths are returned unchanged. Relative paths are placed under
    ``output_dir`` when given, otherwise left relative to the CWD.
    """
    if override is None:
        return None
    if override.is_absolute() or output_dir is None:
        return override
    return output_dir / override


def trace_path_for_run(
    network_path: Path,
    output_dir: Optional[Path],
    trace_override: Optional[Path],
) -> Path:
    """Return where ``flowtrace run`` writes the trace JSON."""
    resolved = resolve_override_path(trace_override, output_dir)
    if resolved is not None:
        return resolved
    return build_artifact_path(
        output_dir, network_prefix_from_path(network_path), TRACE_SUFFIX
    )
