"""python -m flightfuel"""

import sys

from flightfuel.bootstrap.entrypoints import cli_main

sys.exit(cli_main())
