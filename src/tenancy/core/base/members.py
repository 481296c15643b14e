# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

from pydantic import Field

from ..primitives.enums import DocumentCategoryEnum, DocumentTypeEnum, UserRole
from ..primitives.model import Model, new_id


class LinkedMember(Model):
    """A member (agent, owner, tenant, ...) attached to a property with a role."""

    member_id: str
    member_code: str
    name: str
    role: UserRole
    joined_date: date


class Document(Model):
    """An uploaded file reference; the engine never inspects ``url`` contents."""

    id: str = Field(default_factory=new_id)
    name: str
    type: DocumentTypeEnum = DocumentTypeEnum.IMAGE
    category: DocumentCategoryEnum = DocumentCategoryEnum.OTHER
    url: str
    upload_date: date
