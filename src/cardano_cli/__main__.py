"""Allow ``python -m cardano_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cardano_cli`` behaves identically to the
``cardano-cli`` console script.
"""

from __future__ import annotations

from cardano_cli.cli.app import cli

if __name__ == "__main__":
    cli()
