# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause

# an executable whose directory is not on the test PATH unless a fixture puts it there
TOOL_EXE = "/opt/tool/bin/tool"
TOOL_DIR = "/opt/tool/bin"
