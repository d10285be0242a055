"""Global pytest configuration.

Fixtures live in ``sample_networks.py`` next to this file. pytest puts this
directory on ``sys.path``, and the module is registered as a plugin (rather
than imported here) so its fixtures get assertion rewriting and are shared by
every test module.
"""

pytest_plugins = ["sample_networks"]
