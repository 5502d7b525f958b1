"""Main entry point for appstorehub."""

from .cli import main as cli_main


def main():
    """Console script entry point - delegates to the CLI."""
    cli_main()


if __name__ == "__main__":
    main()
