# Tenancy Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenancy test suite.

Unit tests per package (core, engine, reporting, integrations) and
end-to-end lifecycle scenarios.
"""
