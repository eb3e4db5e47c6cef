"""env-run — load dotenv files into the environment and launch a command.

Two variants share one pipeline: ``env-run`` supervises the command as a
child process and forwards signals to it, while ``env-run-exec`` replaces
the current process image with the command.
"""

from env_run.version import __version__

__all__: list[str] = ["__version__"]
