"""Allow ``python -m segpath``."""

import sys

from segpath.ui.cli import main

sys.exit(main())
