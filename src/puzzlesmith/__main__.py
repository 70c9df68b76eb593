"""Allow ``python -m puzzlesmith``."""

import sys

from puzzlesmith.app import main

sys.exit(main())
