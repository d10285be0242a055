"""Max-flow algorithms: residual graph, path search, augmentation, tracing.

Import from the submodules directly; this package does not re-export them so
that ``flowtrace.results`` can depend on ``algorithms.min_cut`` without a cycle.
"""
