"""Command-line interface for FlowTrace."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from flowtrace.algorithms.max_flow import trace_max_flow
from flowtrace.dsl.loader import load_network_file
from flowtrace.logging import get_logger, set_global_log_level
from flowtrace.model.network import FlowNetwork
from flowtrace.types.dto import Step
from flowtrace.utils.output_paths import ensure_parent_dir, trace_path_for_run

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(min_width, max(len(row[i]) for row in all_data))
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise duration, e.g. ``12.3 ms`` or ``1.23 s``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load(path: Path) -> Optional[FlowNetwork]:
    """Load a network or log why it cannot be loaded."""
    try:
        return load_network_file(path)
    except FileNotFoundError:
        logger.error("Network file not found: %s", path)
    except ValueError as exc:
        # ValidationError is a ValueError; both are input problems
        logger.error("Cannot load %s: %s", path, exc)
    return None


def _print_step(step: Step, total: int) -> None:
    print(f"Step {step.index}/{total - 1} [{step.kind.value}]")
    print(f"   {step.description}")
    print(f"   max flow so far: {step.max_flow_so_far}")
    if step.path:
        print(f"   path: {' -> '.join(step.path)}")
    if step.bottleneck is not None:
        print(f"   bottleneck: {step.bottleneck}")
    rows = [[e.source, e.target, f"{e.flow}/{e.capacity}"] for e in step.edges]
    print(_format_table(["From", "To", "Flow"], rows))
    residual = [
        [r.source, r.target, r.capacity, "backward" if r.is_backward else "forward"]
        for r in step.residual_edges
    ]
    if residual:
        print("   residual graph:")
        print(_format_table(["From", "To", "Cap", "Dir"], residual))


def _run_network(
    path: Path,
    trace_override: Optional[Path],
    no_trace: bool,
    stdout: bool,
    output_dir: Optional[Path],
) -> None:
    network = _load(path)
    if network is None:
        sys.exit(1)

    started = perf_counter()
    trace = trace_max_flow(network)
    elapsed = perf_counter() - started
    logger.info(
        "Solved %s in %s: max flow %d, %d steps",
        path.name,
        _format_duration(elapsed),
        trace.max_flow,
        len(trace),
    )

    if stdout:
        print(json.dumps(trace.to_dict(), indent=2, ensure_ascii=False))

    if not no_trace:
        trace_path = trace_path_for_run(path, output_dir, trace_override)
        ensure_parent_dir(trace_path)
        trace.save(trace_path)

    print(f"Maximum flow {trace.source} -> {trace.sink}: {trace.max_flow}")


def _inspect_network(path: Path, detail: bool) -> None:
    network = _load(path)
    if network is None:
        sys.exit(1)

    print(f"Network: {path}")
    print(f"   source: {network.source}")
    print(f"   sink: {network.sink}")
    print(f"   nodes: {len(network.nodes)}")
    print(f"   edges: {len(network.edges)}")
    out_capacity = sum(e.capacity for e in network.edges if e.source == network.source)
    print(f"   source capacity: {out_capacity}")
    if detail:
        print("Nodes:")
        print(_format_table(["Id", "Label"], [[n.id, n.label] for n in network.nodes]))
        print("Edges:")
        print(
            _format_table(
                ["From", "To", "Capacity"],
                [[e.source, e.target, e.capacity] for e in network.edges],
            )
        )


def _show_step(path: Path, index: int) -> None:
    network = _load(path)
    if network is None:
        sys.exit(1)

    trace = trace_max_flow(network)
    try:
        step = trace[index]
    except IndexError:
        logger.error(
            "Step %d is out of range; trace has %d steps (0..%d)",
            index,
            len(trace),
            len(trace) - 1,
        )
        sys.exit(1)
    _print_step(step, len(trace))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowtrace`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowtrace",
        description="Solve max-flow networks and export step-by-step traces.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect,show}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Solve a network and export its trace")
    run_parser.add_argument("network", type=Path, help="Path to network YAML/JSON")
    run_parser.add_argument(
        "--trace",
        "-t",
        type=Path,
        default=None,
        help=(
            "Trace JSON path (default: <network_name>.trace.json;"
            " placed under --output when provided)"
        ),
    )
    run_parser.add_argument(
        "--no-trace", action="store_true", help="Do not write a trace file"
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print the trace JSON to stdout"
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for generated artifacts",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a network and summarize it"
    )
    inspect_parser.add_argument("network", type=Path, help="Path to network YAML/JSON")
    inspect_parser.add_argument(
        "--detail", "-d", action="store_true", help="Print node and edge tables"
    )

    show_parser = subparsers.add_parser("show", help="Print one step of the trace")
    show_parser.add_argument("network", type=Path, help="Path to network YAML/JSON")
    show_parser.add_argument(
        "--step",
        "-s",
        type=int,
        default=-1,
        help="Step index; negative values count from the end (default: -1)",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_network(
            path=args.network,
            trace_override=args.trace,
            no_trace=args.no_trace,
            stdout=args.stdout,
            output_dir=args.output,
        )
    elif args.command == "inspect":
        _inspect_network(args.network, args.detail)
    elif args.command == "show":
        _show_step(args.network, args.step)


if __name__ == "__main__":
    main()
