"""Allow ``python -m ghfetch``."""

from ghfetch.main import cli

if __name__ == "__main__":
    cli()
