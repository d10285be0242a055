"""Edmonds-Karp maximum flow with a replayable step trace."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from flowtrace.algorithms.augment import augment_path, path_bottleneck
from flowtrace.algorithms.bfs import find_augmenting_path
from flowtrace.algorithms.residual import residual_edges
from flowtrace.config import TRACE_CONFIG, TraceConfig
from flowtrace.logging import get_logger
from flowtrace.model.errors import FlowConsistencyError
from flowtrace.model.network import FlowNetwork
from flowtrace.results.trace import Trace
from flowtrace.types.base import PathTuple, StepKind
from flowtrace.types.dto import Step

logger = get_logger(__name__)


class EngineState(Enum):
    RUNNING = "running"
    DONE = "done"


class _TraceRecorder:
    """Appends value snapshots of a live network to a step list."""

    def __init__(self, network: FlowNetwork) -> None:
        self._network = network
        self.steps: List[Step] = []

    def record(
        self,
        kind: StepKind,
        description: str,
        max_flow_so_far: int,
        *,
        iteration: int = 0,
        path: PathTuple = (),
        bottleneck: Optional[int] = None,
    ) -> Step:
        step = Step(
            index=len(self.steps),
            kind=kind,
            iteration=iteration,
            description=description,
            edges=self._network.edge_states(),
            max_flow_so_far=max_flow_so_far,
            path=tuple(path),
            bottleneck=bottleneck,
            residual_edges=residual_edges(self._network),
        )
        self.steps.append(step)
        return step


def trace_max_flow(
    network: FlowNetwork,
    *,
    config: Optional[TraceConfig] = None,
    copy_network: bool = True,
) -> Trace:
    """Compute the maximum flow of ``network`` and record every state.

    Runs until no augmenting path remains. Each augmentation produces two
    steps: a ``path_found`` step showing the path and its bottleneck on the
    pre-augmentation network, then an ``augmented`` step showing the result.
    The first step is the zero-flow network and the last one the final flow.

    Args:
        network: Network to solve. Existing flow is reset to zero.
        config: Description templates and limits; defaults to ``TRACE_CONFIG``.
        copy_network: If True, solve on a private copy so ``network`` is left
            untouched. If False, ``network`` ends up holding the maximum flow.

    Returns:
        The complete trace, including the final maximum flow value.

    Raises:
        FlowConsistencyError: On an internal consistency fault, or when
            ``config.max_augmentations`` is exceeded.

    Example:
        >>> net = FlowNetwork(["s", "t"], [("s", "t", 4)], "s", "t")
        >>> trace_max_flow(net).max_flow
        4
    """
    cfg = config or TRACE_CONFIG
    live = network.copy() if copy_network else network
    live.reset_flow()

    recorder = _TraceRecorder(live)
    max_flow = 0
    iteration = 0
    recorder.record(StepKind.INITIAL, cfg.initial_description, max_flow)

    state = EngineState.RUNNING
    while state is EngineState.RUNNING:
        path = find_augmenting_path(live)
        if path is None:
            state = EngineState.DONE
            continue

        iteration += 1
        if cfg.max_augmentations is not None and iteration > cfg.max_augmentations:
            message = f"Exceeded {cfg.max_augmentations} augmentations"
            logger.error(message)
            raise FlowConsistencyError(message)

        bottleneck = path_bottleneck(live, path)
        fields = {
            "iteration": iteration,
            "path": cfg.format_path(path),
            "bottleneck": bottleneck,
        }
        recorder.record(
            StepKind.PATH_FOUND,
            cfg.path_found_description.format(max_flow=max_flow, **fields),
            max_flow,
            iteration=iteration,
            path=path,
            bottleneck=bottleneck,
        )

        augment_path(live, path, bottleneck)
        max_flow += bottleneck
        logger.debug(
            "Augmentation %d: %s carries %d (total %d)",
            iteration,
            fields["path"],
            bottleneck,
            max_flow,
        )
        recorder.record(
            StepKind.AUGMENTED,
            cfg.augmented_description.format(max_flow=max_flow, **fields),
            max_flow,
            iteration=iteration,
        )

    recorder.record(
        StepKind.DONE,
        cfg.done_description.format(
            iteration=iteration, path="", bottleneck="", max_flow=max_flow
        ),
        max_flow,
    )
    logger.info(
        "Max flow %s -> %s = %d after %d augmentations (%d steps)",
        live.source,
        live.sink,
        max_flow,
        iteration,
        len(recorder.steps),
    )
    return Trace(
        steps=tuple(recorder.steps),
        max_flow=max_flow,
        source=live.source,
        sink=live.sink,
        nodes=live.nodes,
    )


def calc_max_flow(network: FlowNetwork) -> int:
    """Return only the maximum flow value of ``network``."""
    return trace_max_flow(network).max_flow
