# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

import sys

from huepick.cli import main

if __name__ == "__main__":
    sys.exit(main())
