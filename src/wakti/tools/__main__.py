"""CLI entry point for wakti.tools.

Usage:
    python -m wakti.tools classify results.json
    python -m wakti.tools intent "add a login page"
    python -m wakti.tools analyze "restaurant site with booking"
"""

from wakti.tools.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
