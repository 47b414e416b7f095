"""Allow running taskpad as ``python -m taskpad``."""

from taskpad.cli import main

if __name__ == "__main__":
    main()
