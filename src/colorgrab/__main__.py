# src/colorgrab/__main__.py

import sys

from colorgrab.main import main

if __name__ == '__main__':
    sys.exit(main())
