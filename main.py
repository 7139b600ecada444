import sys

from slingshot.app import main

if __name__ == "__main__":
    sys.exit(main())
