"""Module entrypoint for ``python -m moontree``."""

from .cli import main


if __name__ == "__main__":
    main()
