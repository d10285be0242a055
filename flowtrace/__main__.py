"""Allow ``python -m flowtrace``."""

from flowtrace.cli import main

if __name__ == "__main__":
    main()
