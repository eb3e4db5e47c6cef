"""Allow ``python -m env_run`` invocation.

Delegates to the supervised-child error boundary so that
``python -m env_run`` behaves identically to the ``env-run`` console
script.
"""

from __future__ import annotations

from env_run.cli.app import cli

if __name__ == "__main__":
    cli()
