"""Flow augmentation along a node path."""

from __future__ import annotations

from typing import Optional, Sequence

from flowtrace.algorithms.residual import hop_residual
from flowtrace.logging import get_logger
from flowtrace.model.errors import FlowConsistencyError
from flowtrace.model.network import Edge, FlowNetwork
from flowtrace.types.base import NodeID

logger = get_logger(__name__)


def _fault(message: str) -> FlowConsistencyError:
    logger.error("Flow consistency fault: %s", message)
    return FlowConsistencyError(message)


def _check_bounds(edge: Edge) -> None:
    if edge.flow < 0 or edge.flow > edge.capacity:
        raise _fault(
            f"Edge '{edge.source}' -> '{edge.target}' flow {edge.flow} is outside "
            f"[0, {edge.capacity}]"
        )


def path_bottleneck(network: FlowNetwork, path: Sequence[NodeID]) -> int:
    """Return the minimum residual capacity over consecutive pairs of ``path``.

    For a hop ``u -> v`` the residual is the unused capacity of ``u -> v``
    plus the flow that can be cancelled on ``v -> u``.

    Raises:
        FlowConsistencyError: If the path has fewer than two nodes or a hop has
            no positive residual capacity.
    """
    if len(path) < 2:
        raise _fault(f"Augmenting path needs at least two nodes, got {list(path)}")

    bottleneck: Optional[int] = None
    for u, v in zip(path, path[1:]):
        residual = hop_residual(network, u, v)
        if residual <= 0:
            raise _fault(f"Hop '{u}' -> '{v}' has no residual capacity")
        if bottleneck is None or residual < bottleneck:
            bottleneck = residual
    return bottleneck  # type: ignore[return-value]


def augment_path(
    network: FlowNetwork,
    path: Sequence[NodeID],
    amount: Optional[int] = None,
) -> int:
    """Push ``amount`` units of flow along ``path``, mutating ``network``.

    Each hop ``u -> v`` first cancels flow on the antiparallel edge ``v -> u``
    and places the remainder on ``u -> v``. Every touched edge is checked
    against ``0 <= flow <= capacity`` afterwards.

    Args:
        network: Live network to update in place.
        path: Node ids from source to sink.
        amount: Units to push; defaults to the path bottleneck.

    Returns:
        The amount applied.

    Raises:
        FlowConsistencyError: If the amount is not positive or any edge would
            leave its bounds. The network may have been partially updated; the
            caller must discard it.
    """
    if amount is None:
        amount = path_bottleneck(network, path)
    elif len(path) < 2:
        raise _fault(f"Augmenting path needs at least two nodes, got {list(path)}")
    if amount <= 0:
        raise _fault(f"Augmentation amount must be positive, got {amount}")

    for u, v in zip(path, path[1:]):
        remaining = amount
        backward = network.edge(v, u)
        if backward is not None and backward.flow > 0:
            cancelled = min(backward.flow, remaining)
            backward.flow -= cancelled
            remaining -= cancelled
            _check_bounds(backward)
        if remaining:
            forward = network.edge(u, v)
            if forward is None:
                raise _fault(
                    f"No edge '{u}' -> '{v}' to carry {remaining} units of flow"
                )
            forward.flow += remaining
            _check_bounds(forward)

    logger.debug("Augmented %d units along %s", amount, " -> ".join(path))
    return amount
