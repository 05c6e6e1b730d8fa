"""Allow ``python -m sparkapi.cli``."""

from sparkapi.cli.app import run

if __name__ == "__main__":
    run()
