"""Command-line interface."""
import sys

from nucleuslab.app.main import main

if __name__ == "__main__":
    sys.exit(main())
