# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the search and receipt-scan adapters, using a scripted fake client.
"""

from __future__ import annotations

import json
from datetime import date

import pytest

from tenancy.core.primitives import ExpenseCategory, ExpenseStatus
from tenancy.integrations import (
    ModelRequestError,
    ModelResponseError,
    ReceiptExtraction,
    RetryPolicy,
    scan_receipt,
    search_properties,
)


class FakeClient:
    """Returns scripted answers (or raises scripted errors) in order."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.requests = []

    def generate(self, prompt, *, response_schema, image=None):
        self.requests.append({"prompt": prompt, "schema": response_schema, "image": image})
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def no_wait_policy():
    return RetryPolicy(max_jitter=0.0, backoff=lambda attempt: 0.0)


class TestSearchProperties:
    def test_returns_matches_in_input_order(self, make_monthly, no_wait_policy):
        props = [make_monthly(name="A"), make_monthly(name="B"), make_monthly(name="C")]
        client = FakeClient(json.dumps([props[2].id, props[0].id, "invented"]))

        found = search_properties(props, "rooms on floor 12", client, no_wait_policy)

        assert [p.name for p in found] == ["A", "C"]
        prompt = client.requests[0]["prompt"]
        assert 'Process the user query: "rooms on floor 12"' in prompt
        assert props[1].id in prompt
        assert client.requests[0]["schema"]["type"] == "array"

    def test_empty_answer_matches_nothing(self, make_monthly, no_wait_policy):
        client = FakeClient("")
        assert search_properties([make_monthly()], "x", client, no_wait_policy) == []

    def test_malformed_answer(self, make_monthly, no_wait_policy):
        client = FakeClient('{"ids": 1}')
        with pytest.raises(ModelResponseError):
            search_properties([make_monthly()], "x", client, no_wait_policy)

    def test_rate_limit_retried(self, make_monthly, no_wait_policy):
        prop = make_monthly()
        client = FakeClient(ModelRequestError("quota", 429), json.dumps([prop.id]))
        assert search_properties([prop], "x", client, no_wait_policy) == [prop]
        assert len(client.requests) == 2

    def test_client_error_surfaces(self, make_monthly, no_wait_policy):
        client = FakeClient(ModelRequestError("forbidden", 403))
        with pytest.raises(ModelRequestError, match="forbidden"):
            search_properties([make_monthly()], "x", client, no_wait_policy)


class TestScanReceipt:
    def test_extracts_fields(self, no_wait_policy, today):
        client = FakeClient(
            json.dumps(
                {"title": "HomePro", "amount": 845.5, "date": "2024-06-02", "category": "repair"}
            )
        )
        result = scan_receipt(
            "data:image/jpeg;base64,QUJD", client, no_wait_policy, today=today
        )

        assert client.requests[0]["image"] == "QUJD"
        assert "date" in client.requests[0]["schema"]["properties"]
        assert result.title == "HomePro"
        assert result.receipt_date == date(2024, 6, 2)

        expense = result.to_expense()
        assert expense.category == ExpenseCategory.REPAIR
        assert expense.status == ExpenseStatus.PAID
        assert expense.amount == 845.5

    def test_missing_date_defaults_to_today(self, no_wait_policy, today):
        client = FakeClient(json.dumps({"title": "7-Eleven", "amount": 59}))
        result = scan_receipt("QUJD", client, no_wait_policy, today=today)

        assert client.requests[0]["image"] == "QUJD"
        assert result.receipt_date == today
        assert result.to_expense().incurred_on == today

    def test_unreadable_date_defaults_to_today(self, no_wait_policy, today):
        client = FakeClient(json.dumps({"title": "Shop", "amount": 10, "date": "n/a"}))
        result = scan_receipt("QUJD", client, no_wait_policy, today=today)
        assert result.receipt_date == today

    def test_malformed_answer(self, no_wait_policy, today):
        client = FakeClient("[1, 2]")
        with pytest.raises(ModelResponseError):
            scan_receipt("QUJD", client, no_wait_policy, today=today)


def test_unknown_category_falls_back_to_other(today):
    extraction = ReceiptExtraction(title="", amount=12, category="Groceries")
    expense = extraction.to_expense(today)
    assert expense.category == ExpenseCategory.OTHER
    assert expense.title == "Scanned receipt"
    assert expense.incurred_on == today


def test_expense_needs_some_date():
    with pytest.raises(ModelResponseError):
        ReceiptExtraction(title="Shop", amount=1).to_expense()
