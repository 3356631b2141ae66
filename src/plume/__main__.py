import sys

from plume.app import main

sys.exit(main())
