"""Allow ``python -m calc_hub``"""

import sys

from calc_hub.cli import main

sys.exit(main())
