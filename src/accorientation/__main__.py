"""Command-line interface."""
from accorientation.main import main

if __name__ == "__main__":
    raise SystemExit(main())
