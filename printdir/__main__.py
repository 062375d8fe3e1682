"""Module entrypoint for ``python -m printdir``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output setup happen in ``printdir.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
