"""Main entry point for ``python -m nimbus``."""

from nimbus.cli.main import main


if __name__ == "__main__":
    main()
