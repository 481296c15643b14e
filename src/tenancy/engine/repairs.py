# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Inspection and repair workflow.

Per item:      PENDING ──quote_repair──> QUOTED ──confirm_repair──> DONE
                  └────────────── confirm_repair ──────────────────┘
Per property:  NORMAL ──(repair flagged)──> PENDING_REPAIR ──(confirmed)──> COMPLETED

Confirming a repair books its cost as a PAID REPAIR expense on the property
in the same commit that marks the item DONE. Expenses are financial
history: removing the inspection item later leaves its expense in place.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.base import Expense, InspectionDraft, InspectionItem, Property
from ..core.errors import AlreadySatisfiedError, InvalidRequestError, StateError
from ..core.primitives import (
    ExpenseCategory,
    ExpenseStatus,
    ItemRepairStatus,
    MutationEvent,
    RepairStatus,
    as_day,
)
from ..core.primitives.dates import DayLike
from ._lookup import locate, replaced, require_positive, require_text
from .status import MutationResult, commit

logger = logging.getLogger(__name__)


def add_inspection(prop: Property, draft: InspectionDraft, today: DayLike) -> MutationResult:
    """
    Record an inspection finding; newest items are listed first.

    Flagging ``repair_needed`` on a failed item starts its repair at
    PENDING and raises the property's flag to PENDING_REPAIR.

    Raises:
        InvalidRequestError: If the description is blank, or a repair is
            requested for an item that passed inspection
    """
    description = require_text(draft.description, "inspection description")
    if draft.repair_needed and draft.is_ok:
        raise InvalidRequestError("Only failed inspection items can be flagged for repair")

    item = InspectionItem(
        category=draft.category,
        description=description,
        is_ok=draft.is_ok,
        damage_details=draft.damage_details,
        images=list(draft.images),
        inspected_on=as_day(today),
        inspector_name=draft.inspector_name,
        repair_needed=draft.repair_needed,
        repair_estimated_cost=draft.repair_estimated_cost,
        repair_status=ItemRepairStatus.PENDING if draft.repair_needed else None,
    )

    updates = {"inspections": [item] + prop.inspections}
    if item.repair_needed:
        updates["repair_status"] = RepairStatus.PENDING_REPAIR
        logger.debug(f"Inspection {item.id} flags property {prop.id} for repair")
    return commit(prop, today, MutationEvent.INSPECTION_ADDED, **updates)


def _repairable_item(prop: Property, item_id: str):
    index, item = locate(prop.inspections, item_id, "inspection item")
    if item.repair_outstanding:
        return index, item
    if not item.repair_needed:
        raise StateError(
            f"Inspection item {item_id} is not flagged for repair",
            current_state=item.repair_status.value if item.repair_status else "NOT_FLAGGED",
        )
    raise AlreadySatisfiedError(
        f"Repair for inspection item {item_id} is already done",
        current_state=ItemRepairStatus.DONE.value,
    )


def quote_repair(
    prop: Property, item_id: str, estimated_cost: float, today: DayLike
) -> MutationResult:
    """
    Attach a contractor estimate to an outstanding repair (item -> QUOTED).

    Raises:
        InvalidRequestError: If ``estimated_cost`` is not positive
        RecordNotFoundError: If ``item_id`` is not on the property
        StateError: If the item is not flagged for repair
        AlreadySatisfiedError: If the repair is already DONE
    """
    cost = require_positive(estimated_cost, "estimated repair cost")
    index, item = _repairable_item(prop, item_id)

    updated = item.model_copy(
        update={"repair_estimated_cost": cost, "repair_status": ItemRepairStatus.QUOTED}
    )
    return commit(
        prop,
        today,
        MutationEvent.REPAIR_QUOTED,
        inspections=replaced(prop.inspections, index, updated),
    )


def confirm_repair(
    prop: Property,
    item_id: str,
    cost: float,
    today: DayLike,
    expense_title: Optional[str] = None,
) -> MutationResult:
    """
    Confirm the final repair cost and close the repair.

    In one commit: appends a PAID REPAIR expense of ``cost``, sets the
    item's actual cost, linked expense and DONE status, and sets the
    property's repair flag to COMPLETED.

    Raises:
        InvalidRequestError: If ``cost`` is not positive
        RecordNotFoundError: If ``item_id`` is not on the property
        StateError: If the item is not flagged for repair
        AlreadySatisfiedError: If the repair is already DONE
    """
    cost = require_positive(cost, "repair cost")
    index, item = _repairable_item(prop, item_id)

    expense = Expense(
        title=expense_title or f"Repair: {item.description}",
        amount=cost,
        category=ExpenseCategory.REPAIR,
        incurred_on=as_day(today),
        status=ExpenseStatus.PAID,
    )
    updated = item.model_copy(
        update={
            "repair_actual_cost": cost,
            "linked_expense_id": expense.id,
            "repair_status": ItemRepairStatus.DONE,
        }
    )

    logger.debug(f"Repair {item_id} confirmed at {cost:,.2f}; expense {expense.id}")
    return commit(
        prop,
        today,
        MutationEvent.REPAIR_CONFIRMED,
        inspections=replaced(prop.inspections, index, updated),
        expenses=prop.expenses + [expense],
        repair_status=RepairStatus.COMPLETED,
    )


def remove_inspection(prop: Property, item_id: str, today: DayLike) -> MutationResult:
    """Delete an inspection item. Any expense it spawned is kept."""
    index, _ = locate(prop.inspections, item_id, "inspection item")
    remaining = prop.inspections[:index] + prop.inspections[index + 1 :]
    return commit(prop, today, MutationEvent.INSPECTION_REMOVED, inspections=remaining)


def set_repair_status(prop: Property, status: RepairStatus, today: DayLike) -> MutationResult:
    """Manually set the property-level repair flag (e.g. UNDER_REPAIR)."""
    status = RepairStatus(status)
    if prop.repair_status == status:
        raise AlreadySatisfiedError(
            f"Property {prop.id} repair status is already {status.value}",
            current_state=status.value,
        )
    return commit(prop, today, MutationEvent.REPAIR_STATUS_CHANGED, repair_status=status)
