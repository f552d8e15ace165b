"""Allow ``python -m cycle_tracker`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cycle_tracker`` behaves identically to the ``cycle-tracker``
console script.
"""

from __future__ import annotations

from cycle_tracker.cli.app import cli

if __name__ == "__main__":
    cli()
