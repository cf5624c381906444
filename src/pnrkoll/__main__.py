import sys

from pnrkoll.cli import main

sys.exit(main())
