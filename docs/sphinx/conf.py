# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for GqlModel documentation."""

project = "GqlModel"
author = "GqlModel Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
