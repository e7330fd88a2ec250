# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the HyperLIR documentation."""

project = "HyperLIR"
author = "HyperLIR Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
