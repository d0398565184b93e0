#!/usr/bin/env python3
#
# PROJECT: donut-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import sys

from donut_cli_renderer.cli import main


if __name__ == "__main__":
    sys.exit(main())
