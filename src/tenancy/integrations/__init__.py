# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Boundary toward an external text/vision model: retry policy plus the
search and receipt-scan adapters. The engine never calls into this package.
"""

from .assistant import (
    RECEIPT_CATEGORIES,
    ModelClient,
    ModelResponseError,
    ReceiptExtraction,
    scan_receipt,
    search_properties,
)
from .retry import ModelRequestError, RetryPolicy, is_retryable_status, status_code_of

__all__ = [
    "RECEIPT_CATEGORIES",
    "ModelClient",
    "ModelRequestError",
    "ModelResponseError",
    "ReceiptExtraction",
    "RetryPolicy",
    "is_retryable_status",
    "scan_receipt",
    "search_properties",
    "status_code_of",
]
