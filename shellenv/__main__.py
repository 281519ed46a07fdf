# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""shellenv as a module entry point."""

import sys

from .cli.main import main

sys.exit(main())
