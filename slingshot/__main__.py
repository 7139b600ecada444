import sys

from slingshot.app import main

sys.exit(main())
