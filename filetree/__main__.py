"""Module entrypoint for ``python -m filetree``."""

from .cli import main


if __name__ == "__main__":
    main()
