"""Allow ``python -m graph_relax``."""

import sys

from .cli import main

sys.exit(main())
