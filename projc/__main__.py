"""Allow ``python -m projc``."""

from projc.cli import main

if __name__ == "__main__":
    main()
