import sys

from wp_export2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
