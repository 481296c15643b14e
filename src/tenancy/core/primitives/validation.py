# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for common patterns across the codebase.

This module provides standardized validators for:
- Date ordering (end on or after / strictly after start)
- Fields that must be provided together
- Conditional requirements (if X then Y)
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    Methods take the model instance (``mode="after"`` validators) and raise
    ``ValueError`` so pydantic reports them as validation errors.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Any,
        start_field: str,
        end_field: str,
        strict: bool = False,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that ``end_field`` does not precede ``start_field``.

        Args:
            data: Model instance
            start_field: Name of start date field
            end_field: Name of end date field
            strict: When True, equal dates are rejected too
            error_message: Custom error message

        Raises:
            ValueError: If the dates are out of order
        """
        start = getattr(data, start_field, None)
        end = getattr(data, end_field, None)

        if start is not None and end is not None:
            if end < start or (strict and end == start):
                relation = "after" if strict else "on or after"
                msg = error_message or f"{end_field} must be {relation} {start_field}"
                raise ValueError(msg)

        return data

    @classmethod
    def validate_together(
        cls,
        data: Any,
        fields: Sequence[str],
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that a group of fields is either all set or all unset.

        Raises:
            ValueError: If only some of the fields are provided
        """
        present = [f for f in fields if getattr(data, f, None) is not None]
        if present and len(present) != len(fields):
            msg = error_message or f"{', '.join(fields)} must be set together"
            raise ValueError(msg)
        return data

    @classmethod
    def validate_conditional_requirement(
        cls,
        data: Any,
        condition_field: str,
        condition_value: Any,
        required_field: str,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that a field is required when a condition is met.

        Raises:
            ValueError: If required field is missing when condition is met
        """
        if getattr(data, condition_field, None) == condition_value:
            if getattr(data, required_field, None) is None:
                msg = (
                    error_message
                    or f"{required_field} is required when {condition_field} is {condition_value}"
                )
                raise ValueError(msg)
        return data
