"""FlowTrace: max-flow solving with replayable step traces.

FlowTrace computes maximum flow with Edmonds-Karp (BFS augmenting paths) and
records an immutable snapshot of the network after every decision, so a
visualization can seek to any step without re-running the solver.

Primary API:
    FlowNetwork, Node, Edge - Network model
    trace_max_flow() - Solve and return a Trace
    Trace, Step - Recorded, randomly indexable results
    min_cut() - Minimum cut of a saturated network
    load_network_file() - Load a YAML/JSON network definition

Example:
    from flowtrace import FlowNetwork, trace_max_flow

    net = FlowNetwork(
        ["s", "a", "t"], [("s", "a", 5), ("a", "t", 3)], source="s", sink="t"
    )
    trace = trace_max_flow(net)
    trace.max_flow        # 3
    trace[1].path         # ('s', 'a', 't')
"""

from __future__ import annotations

from flowtrace import cli, logging
from flowtrace._version import __version__
from flowtrace.algorithms.augment import augment_path, path_bottleneck
from flowtrace.algorithms.bfs import find_augmenting_path
from flowtrace.algorithms.max_flow import calc_max_flow, trace_max_flow
from flowtrace.algorithms.min_cut import min_cut
from flowtrace.algorithms.residual import residual_edges
from flowtrace.config import TRACE_CONFIG, TraceConfig
from flowtrace.dsl.loader import load_network_file, load_network_yaml
from flowtrace.model.errors import (
    FlowConsistencyError,
    ValidationError,
    ValidationErrorKind,
)
from flowtrace.model.network import Edge, FlowNetwork, Node
from flowtrace.results.trace import Trace
from flowtrace.types.base import StepKind
from flowtrace.types.dto import EdgeState, MinCut, ResidualEdge, Step

__all__ = [
    # Version
    "__version__",
    # Model
    "FlowNetwork",
    "Node",
    "Edge",
    # Algorithms
    "trace_max_flow",
    "calc_max_flow",
    "find_augmenting_path",
    "path_bottleneck",
    "augment_path",
    "residual_edges",
    "min_cut",
    # Results and types
    "Trace",
    "Step",
    "StepKind",
    "EdgeState",
    "ResidualEdge",
    "MinCut",
    # Errors
    "ValidationError",
    "ValidationErrorKind",
    "FlowConsistencyError",
    # Loading and configuration
    "load_network_file",
    "load_network_yaml",
    "TraceConfig",
    "TRACE_CONFIG",
    # Utilities
    "cli",
    "logging",
]
