import sys

from horner.cli import main

if __name__ == "__main__":
    sys.exit(main())
