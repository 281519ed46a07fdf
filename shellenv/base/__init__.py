# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Code in ``shellenv.base`` is the lowest level of the application stack.

It is loaded and executed virtually every time the application is used. Any code placed here
must be lightweight, with minimal imports and minimal processing at load time.
"""
