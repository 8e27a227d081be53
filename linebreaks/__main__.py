"""Module entrypoint for running linebreaks as ``python -m linebreaks``."""

from __future__ import annotations

from linebreaks.cli import main


if __name__ == "__main__":
    main()
