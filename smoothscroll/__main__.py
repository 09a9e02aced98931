"""Module entrypoint for ``python -m smoothscroll``."""

from .cli import main


if __name__ == "__main__":
    main()
