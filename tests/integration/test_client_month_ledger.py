"""Integration tests for the monthly credit ledger

Tests cover:
- Idempotent add of a client to a month
- Credit calculation and summary arithmetic over stored outputs
- Output rows removed when both counts reach zero
- Removing a client from a month removes its outputs
- Settings history for tracked changes, newest first
"""

import pytest
from decimal import Decimal

from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.adapter.repositories import (
    SqlAlchemyClientDirectoryRepository,
    SqlAlchemyClientMonthOutputRepository,
    SqlAlchemyClientMonthRepository,
    SqlAlchemyCreativeBoostClientRepository,
    SqlAlchemyOutputTypeRepository,
    SqlAlchemySettingsChangeRepository,
)
from creative_boost.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from creative_boost.app.use_cases.creative_boost import (
    ActorDTO,
    AddClientToMonth,
    AddClientToMonthCommandDTO,
    ClientMonthPatchDTO,
    ClientMonthSettingsDTO,
    GetClientMonthSummaries,
    GetSettingsHistory,
    OutputPatchDTO,
    RemoveClientFromMonth,
    UpdateClientMonth,
    UpdateClientMonthCommandDTO,
    UpdateClientOutput,
    UpdateClientOutputCommandDTO,
)
from creative_boost.domain import MonthStatus

ACTOR = ActorDTO(id="user_1", full_name="Jana Novakova")


async def add_client(db_session: AsyncSession, client_id: str = "client_1", **settings):
    use_case = AddClientToMonth(
        SqlAlchemyUnitOfWork(db_session),
        SqlAlchemyClientMonthRepository(db_session),
        SqlAlchemyCreativeBoostClientRepository(db_session),
    )
    return await use_case.execute(
        AddClientToMonthCommandDTO(
            client_id=client_id, year=2024, month=3, settings=ClientMonthSettingsDTO(**settings)
        )
    )


async def set_output(db_session: AsyncSession, output_type_id: str, **patch):
    use_case = UpdateClientOutput(SqlAlchemyUnitOfWork(db_session), SqlAlchemyClientMonthOutputRepository(db_session))
    return await use_case.execute(
        UpdateClientOutputCommandDTO(
            client_id="client_1",
            output_type_id=output_type_id,
            year=2024,
            month=3,
            patch=OutputPatchDTO(**patch),
        )
    )


async def update_client_month(db_session: AsyncSession, client_month_id: str, **patch):
    use_case = UpdateClientMonth(
        SqlAlchemyUnitOfWork(db_session),
        SqlAlchemyClientMonthRepository(db_session),
        SqlAlchemySettingsChangeRepository(db_session),
        strict=True,
    )
    return await use_case.execute(
        UpdateClientMonthCommandDTO(client_month_id=client_month_id, patch=ClientMonthPatchDTO(**patch), actor=ACTOR)
    )


@pytest.mark.asyncio
class TestAddClientToMonthIntegration:
    async def test_add_is_idempotent(self, db_session: AsyncSession, catalog):
        """
        Given: client_1 is added to March 2024 with max 60
        When: It is added again with max 90
        Then: The same row is returned unchanged and only one row exists
        """
        # Act
        first = await add_client(db_session, max_credits=Decimal("60"))
        second = await add_client(db_session, max_credits=Decimal("90"))

        # Assert
        assert first.is_ok() and second.is_ok()
        assert second.value.id == first.value.id
        assert second.value.max_credits == Decimal("60")

        rows = await SqlAlchemyClientMonthRepository(db_session).list_for_period(2024, 3)
        assert len(rows) == 1

    async def test_add_creates_client_config_from_defaults(self, db_session: AsyncSession, catalog):
        result = await add_client(db_session)

        assert result.value.min_credits == Decimal("30")
        assert result.value.max_credits == Decimal("50")
        assert result.value.price_per_credit == Decimal("1500")
        assert result.value.status == MonthStatus.ACTIVE

        config = await SqlAlchemyCreativeBoostClientRepository(db_session).get_by_client_id("client_1")
        assert config is not None
        assert config.default_max_credits == Decimal("50")


@pytest.mark.asyncio
class TestOutputsAndSummaryIntegration:
    async def test_summary_arithmetic(self, db_session: AsyncSession, catalog):
        """
        Given: client_1 on March 2024 with max 50 and price 1500
        When: 3 normal + 2 express banners (base 2) and 1 normal video (base 5) are logged
        Then: normal 11, express 6, used 17, remaining 33, estimated invoice 25500
        """
        # Arrange
        await add_client(db_session)
        await set_output(db_session, "type_banner", normal_count=3, express_count=2, colleague_id="col_1")
        await set_output(db_session, "type_video", normal_count=1, colleague_id="col_1")

        # Act
        result = await GetClientMonthSummaries(
            SqlAlchemyClientMonthRepository(db_session),
            SqlAlchemyClientMonthOutputRepository(db_session),
            SqlAlchemyOutputTypeRepository(db_session),
            SqlAlchemyClientDirectoryRepository(db_session),
        ).execute(2024, 3)

        # Assert
        assert result.is_ok()
        [summary] = result.value
        assert summary.brand_name == "Acme"
        assert summary.normal_credits == Decimal("11")
        assert summary.express_credits == Decimal("6")
        assert summary.used_credits == Decimal("17")
        assert summary.remaining_credits == Decimal("33")
        assert summary.estimated_invoice == Decimal("25500")
        assert summary.item_count == 2

    async def test_overage_gives_negative_remaining(self, db_session: AsyncSession, catalog):
        await add_client(db_session, max_credits=Decimal("10"))
        await set_output(db_session, "type_video", normal_count=3)

        result = await GetClientMonthSummaries(
            SqlAlchemyClientMonthRepository(db_session),
            SqlAlchemyClientMonthOutputRepository(db_session),
            SqlAlchemyOutputTypeRepository(db_session),
            SqlAlchemyClientDirectoryRepository(db_session),
        ).execute(2024, 3)

        assert result.value[0].remaining_credits == Decimal("-5")

    async def test_partial_update_keeps_other_count(self, db_session: AsyncSession, catalog):
        await set_output(db_session, "type_banner", normal_count=3, express_count=2)

        result = await set_output(db_session, "type_banner", express_count=4)

        assert result.value.normal_count == 3
        assert result.value.express_count == 4

    async def test_zero_counts_delete_output_row(self, db_session: AsyncSession, catalog):
        # Arrange
        await set_output(db_session, "type_banner", normal_count=3, express_count=2)

        # Act
        result = await set_output(db_session, "type_banner", normal_count=0, express_count=0)

        # Assert
        assert result.is_ok()
        assert result.value is None
        outputs = await SqlAlchemyClientMonthOutputRepository(db_session).list_for_client_period("client_1", 2024, 3)
        assert outputs == []


@pytest.mark.asyncio
class TestRemoveClientFromMonthIntegration:
    async def test_remove_cascades_to_outputs(self, db_session: AsyncSession, catalog):
        # Arrange
        await add_client(db_session)
        await set_output(db_session, "type_banner", normal_count=1)
        await set_output(db_session, "type_video", express_count=1)

        # Act
        result = await RemoveClientFromMonth(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyClientMonthRepository(db_session),
            SqlAlchemyClientMonthOutputRepository(db_session),
        ).execute("client_1", 2024, 3)

        # Assert
        assert result.value.client_month_removed is True
        assert result.value.outputs_removed == 2
        assert await SqlAlchemyClientMonthRepository(db_session).get_by_client_period("client_1", 2024, 3) is None
        assert await SqlAlchemyClientMonthOutputRepository(db_session).list_for_client_period("client_1", 2024, 3) == []


@pytest.mark.asyncio
class TestSettingsHistoryIntegration:
    async def test_max_credit_change_is_recorded(self, db_session: AsyncSession, catalog):
        """
        Given: client month with max 50
        When: max is changed to 60
        Then: One history entry "Max credits" 50 -> 60 by the actor
        """
        # Arrange
        added = await add_client(db_session)

        # Act
        result = await update_client_month(db_session, added.value.id, max_credits=Decimal("60"))

        # Assert
        assert result.value.max_credits == Decimal("60")
        history = await GetSettingsHistory(SqlAlchemySettingsChangeRepository(db_session)).execute("client_1")
        [change] = history.value
        assert change.field_name == "Max credits"
        assert change.old_value == "50"
        assert change.new_value == "60"
        assert change.changed_by == "user_1"
        assert change.changed_by_name == "Jana Novakova"

    async def test_three_tracked_changes_in_one_update(self, db_session: AsyncSession, catalog):
        added = await add_client(db_session)

        await update_client_month(
            db_session,
            added.value.id,
            max_credits=Decimal("70"),
            price_per_credit=Decimal("1400"),
            status=MonthStatus.INACTIVE,
            colleague_id="col_9",
        )

        history = await GetSettingsHistory(SqlAlchemySettingsChangeRepository(db_session)).execute(
            "client_1", year=2024, month=3
        )
        changes = {c.field_name: (c.old_value, c.new_value) for c in history.value}
        assert changes == {
            "Max credits": ("50", "70"),
            "Price per credit": ("1500", "1400"),
            "Status": ("Active", "Inactive"),
        }

    async def test_unchanged_value_is_not_recorded(self, db_session: AsyncSession, catalog):
        added = await add_client(db_session)

        await update_client_month(db_session, added.value.id, max_credits=Decimal("50"))

        history = await GetSettingsHistory(SqlAlchemySettingsChangeRepository(db_session)).execute("client_1")
        assert history.value == []

    async def test_history_is_newest_first(self, db_session: AsyncSession, catalog):
        added = await add_client(db_session)

        await update_client_month(db_session, added.value.id, max_credits=Decimal("60"))
        await update_client_month(db_session, added.value.id, max_credits=Decimal("75"))

        history = await GetSettingsHistory(SqlAlchemySettingsChangeRepository(db_session)).execute("client_1")
        assert [c.new_value for c in history.value] == ["75", "60"]
        assert history.value[0].changed_at >= history.value[1].changed_at
