"""Module entrypoint for ``python -m buildsizes``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and report rendering happen in ``buildsizes.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
