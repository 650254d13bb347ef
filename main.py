import sys

from kusabi.cli import main


if __name__ == "__main__":
    sys.exit(main())
