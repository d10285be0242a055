"""Small helpers shared by the loader and the CLI."""
