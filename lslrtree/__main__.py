"""Allow running lslrtree as a module: python -m lslrtree LISTING."""

import sys

from .cli import main

sys.exit(main())
