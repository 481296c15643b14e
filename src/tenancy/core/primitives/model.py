# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable records; every engine operation returns a replacement snapshot
    built with `model_copy(update=...)` instead of mutating in place.
    """

    model_config = ConfigDict(
        frozen=True,  # Snapshots are replaced, never edited
        extra="forbid",  # Catches typos and missing field definitions immediately
    )


def new_id() -> str:
    """Opaque unique identifier for a new record."""
    return uuid.uuid4().hex
