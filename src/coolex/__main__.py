"""Allow ``python -m coolex FILE...``."""

import sys

from coolex.cli import main

sys.exit(main())
