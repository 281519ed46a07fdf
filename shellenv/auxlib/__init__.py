# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Auxiliary library: small helpers shared across shellenv."""
