# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Adapters for an external text/vision model.

Two one-shot requests are supported: natural-language search over a
property list, and field extraction from a receipt image. The model client
itself is supplied by the caller (any object with a matching ``generate``
method); these adapters only build prompts, apply the retry policy and
validate the JSON that comes back. They never modify property state.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Protocol

from dateutil import parser as date_parser
from pydantic import ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from ..core.base import Expense, Property
from ..core.errors import TenancyError
from ..core.primitives import ExpenseCategory, ExpenseStatus, Model, as_day, enum_to_string
from ..core.primitives.dates import DayLike
from ..core.primitives.types import PositiveFloat
from .retry import RetryPolicy

logger = logging.getLogger(__name__)

_ID_LIST = TypeAdapter(List[str])

RECEIPT_CATEGORIES = (
    ExpenseCategory.REPAIR,
    ExpenseCategory.UTILITY,
    ExpenseCategory.COMMON_FEE,
    ExpenseCategory.COMMISSION,
    ExpenseCategory.OTHER,
)


class ModelClient(Protocol):
    """Anything that can answer a prompt with JSON text matching ``response_schema``."""

    def generate(
        self,
        prompt: str,
        *,
        response_schema: Dict[str, Any],
        image: Optional[str] = None,
    ) -> str: ...


class ModelResponseError(TenancyError):
    """The model answered, but not with the JSON shape that was requested."""


class ReceiptExtraction(Model):
    """
    Fields read off a receipt image.

    The model's ``date`` key maps to `receipt_date`. Dates are parsed
    leniently; anything unreadable is treated as missing.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = ""
    amount: PositiveFloat = 0.0
    receipt_date: Optional[date] = Field(default=None, alias="date")
    category: str = ExpenseCategory.OTHER.value

    @field_validator("receipt_date", mode="before")
    @classmethod
    def parse_loose_date(cls, value: Any) -> Any:
        if value is None or isinstance(value, date):
            return value
        text = str(value).strip()
        if not text:
            return None
        try:
            return date_parser.parse(text).date()
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring unreadable receipt date {text!r}")
            return None

    @property
    def expense_category(self) -> ExpenseCategory:
        """Category as an enum member; unknown labels fall back to OTHER."""
        return ExpenseCategory.__members__.get(
            self.category.strip().upper(), ExpenseCategory.OTHER
        )

    def to_expense(self, today: Optional[DayLike] = None) -> Expense:
        """
        Build a PAID expense from the extraction.

        ``today`` is used when the receipt carried no readable date.
        """
        incurred_on = self.receipt_date
        if incurred_on is None:
            if today is None:
                raise ModelResponseError("Receipt has no date and no fallback day was given")
            incurred_on = as_day(today)
        return Expense(
            title=self.title.strip() or "Scanned receipt",
            amount=self.amount,
            category=self.expense_category,
            incurred_on=incurred_on,
            status=ExpenseStatus.PAID,
        )


def _search_projection(prop: Property) -> Dict[str, Any]:
    contract = prop.contract
    return {
        "id": prop.id,
        "name": prop.name,
        "building": prop.building,
        "floor": prop.floor,
        "room": prop.room_number,
        "unit": prop.unit_number,
        "status": enum_to_string(prop.status),
        "rent": prop.rent_amount,
        "tenant": contract.tenant_name if contract else None,
        "repair": enum_to_string(prop.repair_status),
    }


def search_properties(
    properties: Iterable[Property],
    query: str,
    client: ModelClient,
    policy: Optional[RetryPolicy] = None,
) -> List[Property]:
    """
    Natural-language search over a property list.

    The model sees a compact projection of each property and answers with
    a JSON array of matching ids. Matches are returned in input order;
    ids the model invents are ignored.

    Raises:
        ModelResponseError: If the answer is not a JSON array of strings
        Exception: Whatever the client raised, once retries are exhausted
            or immediately for non-retryable errors
    """
    properties = list(properties)
    policy = policy or RetryPolicy()
    data = json.dumps([_search_projection(p) for p in properties], ensure_ascii=False)
    prompt = (
        "You are an assistant for a property management office.\n"
        "Below is a list of properties in JSON format.\n"
        f'Process the user query: "{query}"\n'
        "Users might search by room number, building, floor, project name, or status.\n"
        "Return ONLY a JSON array of the matching property IDs.\n\n"
        f"Data: {data}"
    )

    text = policy.run(lambda: client.generate(prompt, response_schema=_ID_LIST.json_schema()))
    try:
        wanted = set(_ID_LIST.validate_json(text or "[]"))
    except ValidationError as e:
        raise ModelResponseError(f"Search answer is not a list of ids: {text!r}") from e

    matches = [p for p in properties if p.id in wanted]
    logger.info(f"Search {query!r} matched {len(matches)} of {len(properties)} properties")
    return matches


def _strip_data_url(image: str) -> str:
    """``data:image/jpeg;base64,AAAA`` -> ``AAAA``; bare base64 passes through."""
    if image.startswith("data:") and "," in image:
        return image.split(",", 1)[1]
    return image


def scan_receipt(
    image: str,
    client: ModelClient,
    policy: Optional[RetryPolicy] = None,
    *,
    today: DayLike,
) -> ReceiptExtraction:
    """
    Extract title, amount, date and category from a base64 receipt image.

    A missing or unreadable date is filled with ``today`` so the result can
    always be turned into an expense with `ReceiptExtraction.to_expense`.

    Raises:
        ModelResponseError: If the answer is not a JSON object of the
            requested shape
    """
    policy = policy or RetryPolicy()
    labels = ", ".join(c.value for c in RECEIPT_CATEGORIES)
    prompt = (
        "Extract details from this receipt image. Focus on the vendor name (title), "
        "the total amount, the date, and categorize it into one of these: "
        f"{labels}. Return ONLY a JSON object."
    )
    schema = ReceiptExtraction.model_json_schema(by_alias=True)
    payload = _strip_data_url(image)

    text = policy.run(lambda: client.generate(prompt, response_schema=schema, image=payload))
    try:
        extraction = ReceiptExtraction.model_validate_json(text or "{}")
    except ValidationError as e:
        raise ModelResponseError(f"Receipt answer has an unexpected shape: {text!r}") from e

    if extraction.receipt_date is None:
        extraction = extraction.model_copy(update={"receipt_date": as_day(today)})
    return extraction
