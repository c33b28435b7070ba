"""Arcade maze generator CLI entry point.

Thin wrapper so the generator can be started from a checkout with
`python run.py`; the installed `mazegen` command calls the same code.

Run `python run.py --help` for details.
"""

import sys

from mazegen.cli import cli, main, parse_args  # noqa: F401

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
