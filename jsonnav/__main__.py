"""Module entrypoint for ``python -m jsonnav``."""

from .cli import main


if __name__ == "__main__":
    main()
