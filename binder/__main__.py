"""Module entrypoint for running Binder as ``python -m binder``."""

from __future__ import annotations

from binder.cli import main


if __name__ == "__main__":
    main()
