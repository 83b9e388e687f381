"""Allow running the tool with ``python -m add_prefix``"""

import sys

from .cli import main

sys.exit(main())
