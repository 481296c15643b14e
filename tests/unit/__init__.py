# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for tenancy components.

Isolated tests of individual functions and models; no test touches the
system clock or the network.
"""
