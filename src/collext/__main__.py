"""Allow ``python -m collext`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m collext`` behaves identically to the ``collext``
console script.
"""

from __future__ import annotations

from collext.cli.app import cli

if __name__ == "__main__":
    cli()
