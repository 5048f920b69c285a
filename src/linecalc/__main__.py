import sys

from linecalc.cli import main

if __name__ == "__main__":
    sys.exit(main())
