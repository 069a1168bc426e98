"""Allow ``python -m dinicflow``."""

from dinicflow.cli import main

if __name__ == "__main__":
    main()
