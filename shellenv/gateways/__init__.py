# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Gateways isolate interaction of shellenv code with the outside world.

Only logging lives here for now; script text itself is written to stdout by the CLI layer.
"""
