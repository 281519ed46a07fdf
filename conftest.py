# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause


def pytest_addoption(parser):
    parser.addoption(
        "--shell",
        action="append",
        default=[],
        help="list of shells to run shell integration tests on (default: all installed)",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: evaluates generated scripts with a real shell"
    )
