"""Allow ``python -m atlas2html``."""

import sys

from atlas2html.cli import main

sys.exit(main())
