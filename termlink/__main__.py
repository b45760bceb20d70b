"""Entry point for running termlink as a module."""

from termlink.cli.main import main

if __name__ == "__main__":
    main()
