#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import sys

from .cli import main

sys.exit(main())
