# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for tenancy.

Complete property lifecycles driven through the public engine API.
"""
