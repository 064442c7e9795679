import sys

from listing_enhancer.cli import main


if __name__ == "__main__":
    sys.exit(main())
