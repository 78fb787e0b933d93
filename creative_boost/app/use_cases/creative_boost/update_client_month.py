"""UpdateClientMonth Use Case

Updates a client month's budget, price, colleague or status and records
an audit entry for every tracked field that changes.
"""

import logging
from datetime import datetime
from creative_boost.domain.base import utcnow
from decimal import Decimal
from typing import Any, List, Optional
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.settings_change_repository import SettingsChangeRepository
from creative_boost.domain.client_month import ClientMonth, MonthStatus
from creative_boost.domain.settings_change import SettingsChange, SettingsChangeType
from .dtos import UpdateClientMonthCommandDTO, ClientMonthDTO, ActorDTO

logger = logging.getLogger(__name__)

# Tracked fields: (attribute, change type, label)
TRACKED_FIELDS = [
    ("max_credits", SettingsChangeType.MAX_CREDITS, "Max credits"),
    ("price_per_credit", SettingsChangeType.PRICE_PER_CREDIT, "Price per credit"),
    ("status", SettingsChangeType.STATUS, "Status"),
]

STATUS_LABELS = {
    MonthStatus.ACTIVE: "Active",
    MonthStatus.INACTIVE: "Inactive",
}


def format_setting_value(value: Any) -> str:
    """Render a tracked value for the audit trail ("50", "1500.5", "Active")"""
    if isinstance(value, MonthStatus):
        return STATUS_LABELS[value]
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if value in (MonthStatus.ACTIVE.value, MonthStatus.INACTIVE.value):
        return STATUS_LABELS[MonthStatus(value)]
    return str(value)


def values_differ(old: Any, new: Any) -> bool:
    if isinstance(old, Decimal) or isinstance(new, Decimal):
        return Decimal(str(old)) != Decimal(str(new))
    return old != new


def diff_settings(
    client_month: ClientMonth, patch: dict[str, Any], actor: ActorDTO, changed_at: datetime
) -> List[SettingsChange]:
    """
    Build one SettingsChange per tracked field whose patched value differs
    from the stored value. Must run before the patch is applied.
    """
    changes: List[SettingsChange] = []

    for field, change_type, label in TRACKED_FIELDS:
        if field not in patch or patch[field] is None:
            continue

        old_value = getattr(client_month, field)
        new_value = patch[field]
        if not values_differ(old_value, new_value):
            continue

        changes.append(
            SettingsChange(
                client_month_id=client_month.id,
                client_id=client_month.client_id,
                year=client_month.year,
                month=client_month.month,
                change_type=change_type,
                field_name=label,
                old_value=format_setting_value(old_value),
                new_value=format_setting_value(new_value),
                changed_by=actor.id,
                changed_by_name=actor.full_name,
                changed_at=changed_at,
            )
        )

    return changes


class UpdateClientMonth:
    """
    Use Case: Update a client month

    Business Rules:
    1. Audit: max_credits, price_per_credit and status are diffed against
       the stored values before the merge; each changed field appends one
       SettingsChange in the same unit of work
    2. Merge: set fields of the patch replace stored values, updated_at is bumped
    3. Missing id: no-op returning None, or CLIENT_MONTH_NOT_FOUND when strict

    Flow:
    1. Load the client month
    2. Diff tracked fields and append history
    3. Merge the patch
    4. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_month_repo: ClientMonthRepository,
        settings_change_repo: SettingsChangeRepository,
        strict: bool = False,
    ):
        self.uow = uow
        self.client_month_repo = client_month_repo
        self.settings_change_repo = settings_change_repo
        self.strict = strict

    async def execute(self, command: UpdateClientMonthCommandDTO) -> Result[Optional[ClientMonthDTO]]:
        try:
            # Step 1: Load
            client_month = await self.client_month_repo.get_by_id(command.client_month_id)
            if not client_month:
                if self.strict:
                    return Return.err(
                        Error(
                            code="CLIENT_MONTH_NOT_FOUND",
                            message=f"Client month {command.client_month_id} not found",
                        )
                    )
                logger.warning(f"Ignoring update of unknown client month {command.client_month_id}")
                return Return.ok(None)

            patch = command.patch.model_dump(exclude_unset=True, exclude_none=True)
            now = utcnow()

            # Step 2: Audit against pre-update values
            changes = diff_settings(client_month, patch, command.actor, now)
            for change in changes:
                await self.settings_change_repo.create(change)

            # Step 3: Merge
            for field, value in patch.items():
                setattr(client_month, field, value)
            client_month.updated_at = now

            updated = await self.client_month_repo.update(client_month)

            # Step 4: Commit
            await self.uow.commit()

            logger.info(
                f"Updated client month {client_month.id} by {command.actor.id}: "
                f"{len(changes)} settings change(s) recorded"
            )
            return Return.ok(ClientMonthDTO.model_validate(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update client month {command.client_month_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_MONTH_FAILED",
                    message="Failed to update client month",
                    reason=str(e),
                )
            )
