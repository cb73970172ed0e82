"""Allow ``python -m topic_index``."""

import sys

from ._cli import main

sys.exit(main())
