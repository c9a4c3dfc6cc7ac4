# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the UCDF documentation."""

project = "UCDF"
author = "UCDF Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
