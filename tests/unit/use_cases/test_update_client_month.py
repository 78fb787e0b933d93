"""Unit tests for UpdateClientMonth use case

Tests cover:
- One settings change per changed tracked field, recorded before the merge
- Display formatting of recorded values
- Untracked fields and unchanged values are not audited
- Unknown id: no-op by default, CLIENT_MONTH_NOT_FOUND when strict
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from creative_boost.app.use_cases.creative_boost.update_client_month import (
    UpdateClientMonth,
    format_setting_value,
)
from creative_boost.app.use_cases.creative_boost.dtos import (
    ActorDTO,
    ClientMonthPatchDTO,
    UpdateClientMonthCommandDTO,
)
from creative_boost.domain.client_month import MonthStatus
from creative_boost.domain.settings_change import SettingsChangeType
from tests.unit.factories import make_client_month


@pytest.fixture
def actor():
    return ActorDTO(id="user_1", full_name="Jana Novakova")


@pytest.fixture
def client_month():
    return make_client_month(max_credits="50.000000", price_per_credit="1500.000000")


@pytest.fixture
def mock_client_month_repo(client_month):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=client_month)
    repo.update = AsyncMock(side_effect=lambda cm: cm)
    return repo


@pytest.fixture
def mock_settings_change_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda change: change)
    return repo


@pytest.fixture
def use_case(mock_uow, mock_client_month_repo, mock_settings_change_repo):
    return UpdateClientMonth(mock_uow, mock_client_month_repo, mock_settings_change_repo)


def recorded_changes(mock_settings_change_repo):
    return [c.args[0] for c in mock_settings_change_repo.create.call_args_list]


@pytest.mark.asyncio
class TestUpdateClientMonthAudit:
    async def test_max_credits_change_is_recorded(
        self, use_case, mock_uow, mock_settings_change_repo, client_month, actor
    ):
        """
        Given: Client month with max_credits 50
        When: max_credits is updated to 60
        Then: One max_credits change (50 -> 60) by the actor, row updated
        """
        # Arrange
        command = UpdateClientMonthCommandDTO(
            client_month_id=client_month.id,
            patch=ClientMonthPatchDTO(max_credits=Decimal("60")),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.max_credits == Decimal("60")

        changes = recorded_changes(mock_settings_change_repo)
        assert len(changes) == 1
        change = changes[0]
        assert change.change_type == SettingsChangeType.MAX_CREDITS
        assert change.field_name == "Max credits"
        assert change.old_value == "50"
        assert change.new_value == "60"
        assert change.changed_by == "user_1"
        assert change.changed_by_name == "Jana Novakova"
        assert change.client_month_id == client_month.id
        assert (change.client_id, change.year, change.month) == ("client_1", 2024, 3)
        assert change.changed_at.tzinfo is not None
        assert client_month.updated_at.tzinfo is not None
        mock_uow.commit.assert_called_once()

    async def test_three_tracked_changes_append_three_entries(
        self, use_case, mock_settings_change_repo, client_month, actor
    ):
        # Arrange
        command = UpdateClientMonthCommandDTO(
            client_month_id=client_month.id,
            patch=ClientMonthPatchDTO(
                max_credits=Decimal("60"),
                price_per_credit=Decimal("1600.5"),
                status=MonthStatus.INACTIVE,
            ),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        changes = {c.change_type: c for c in recorded_changes(mock_settings_change_repo)}
        assert set(changes) == {
            SettingsChangeType.MAX_CREDITS,
            SettingsChangeType.PRICE_PER_CREDIT,
            SettingsChangeType.STATUS,
        }
        assert changes[SettingsChangeType.PRICE_PER_CREDIT].old_value == "1500"
        assert changes[SettingsChangeType.PRICE_PER_CREDIT].new_value == "1600.5"
        assert changes[SettingsChangeType.STATUS].old_value == "Active"
        assert changes[SettingsChangeType.STATUS].new_value == "Inactive"
        assert client_month.status == MonthStatus.INACTIVE

    async def test_unchanged_and_untracked_fields_are_not_recorded(
        self, use_case, mock_settings_change_repo, client_month, actor
    ):
        """
        Given: Patch sets max_credits to its current value and changes min_credits and colleague
        When: Client month is updated
        Then: No settings change is recorded but the fields are merged
        """
        # Arrange
        command = UpdateClientMonthCommandDTO(
            client_month_id=client_month.id,
            patch=ClientMonthPatchDTO(max_credits=Decimal("50"), min_credits=Decimal("20"), colleague_id="col_9"),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        mock_settings_change_repo.create.assert_not_called()
        assert result.value.min_credits == Decimal("20")
        assert result.value.colleague_id == "col_9"


@pytest.mark.asyncio
class TestUpdateClientMonthMissing:
    async def test_unknown_id_is_noop(
        self, use_case, mock_uow, mock_client_month_repo, mock_settings_change_repo, actor
    ):
        # Arrange
        mock_client_month_repo.get_by_id = AsyncMock(return_value=None)
        command = UpdateClientMonthCommandDTO(
            client_month_id="cm_missing",
            patch=ClientMonthPatchDTO(max_credits=Decimal("60")),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value is None
        mock_settings_change_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unknown_id_is_error_when_strict(
        self, mock_uow, mock_client_month_repo, mock_settings_change_repo, actor
    ):
        # Arrange
        mock_client_month_repo.get_by_id = AsyncMock(return_value=None)
        use_case = UpdateClientMonth(mock_uow, mock_client_month_repo, mock_settings_change_repo, strict=True)
        command = UpdateClientMonthCommandDTO(
            client_month_id="cm_missing",
            patch=ClientMonthPatchDTO(max_credits=Decimal("60")),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "CLIENT_MONTH_NOT_FOUND"


@pytest.mark.asyncio
class TestUpdateClientMonthErrors:
    async def test_history_failure_rolls_back(
        self, use_case, mock_uow, mock_client_month_repo, mock_settings_change_repo, client_month, actor
    ):
        # Arrange
        mock_settings_change_repo.create = AsyncMock(side_effect=Exception("disk full"))
        command = UpdateClientMonthCommandDTO(
            client_month_id=client_month.id,
            patch=ClientMonthPatchDTO(max_credits=Decimal("60")),
            actor=actor,
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "UPDATE_CLIENT_MONTH_FAILED"
        mock_client_month_repo.update.assert_not_called()
        mock_uow.rollback.assert_called_once()


class TestFormatSettingValue:
    def test_decimal_without_trailing_zeros(self):
        assert format_setting_value(Decimal("50.000000")) == "50"
        assert format_setting_value(Decimal("1500.500000")) == "1500.5"

    def test_status_labels(self):
        assert format_setting_value(MonthStatus.ACTIVE) == "Active"
        assert format_setting_value("inactive") == "Inactive"
