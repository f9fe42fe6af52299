"""Allow ``python -m trcatalog`` to run the sync tool."""

import sys

from trcatalog.cli import main

sys.exit(main())
