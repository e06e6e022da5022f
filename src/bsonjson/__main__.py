# src/bsonjson/__main__.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Allow ``python -m bsonjson``."""

from bsonjson.tasks.cli import app

app(prog_name="bs")
