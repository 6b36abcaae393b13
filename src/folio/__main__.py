"""Main entry point for the Folio CLI."""

from folio.cli import main

if __name__ == "__main__":
    main()
