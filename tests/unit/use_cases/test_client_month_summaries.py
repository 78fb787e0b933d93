"""Unit tests for the client month summary projection

Tests cover:
- used = normal + express, remaining = max - used, invoice = used * price
- Overage yields negative remaining credits
- Clients missing from the directory are skipped
- Lookup through the engagement service linkage
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from creative_boost.app.use_cases.creative_boost.get_client_month_summaries import (
    GetClientMonthSummaries,
    GetClientMonthSummaryByEngagementService,
)
from tests.unit.factories import (
    make_client,
    make_client_month,
    make_output,
    make_output_type,
)


@pytest.fixture
def mock_client_month_repo():
    return MagicMock()


@pytest.fixture
def mock_output_repo():
    return MagicMock()


@pytest.fixture
def mock_output_type_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(
        return_value=[
            make_output_type(id="type_banner", name="Banner", base_credits="2"),
            make_output_type(id="type_video", name="Video", base_credits="5"),
        ]
    )
    return repo


@pytest.fixture
def mock_client_directory():
    directory = MagicMock()
    directory.get_by_id = AsyncMock(return_value=make_client())
    return directory


@pytest.fixture
def use_case(mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory):
    return GetClientMonthSummaries(
        mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
    )


@pytest.mark.asyncio
class TestGetClientMonthSummaries:
    async def test_summary_figures(self, use_case, mock_client_month_repo, mock_output_repo):
        """
        Given: max 50, price 1500; banner 3 normal + 2 express (base 2), video 1 normal (base 5)
        When: Summaries are projected
        Then: normal 11, express 6, used 17, remaining 33, invoice 25500, 2 items
        """
        # Arrange
        mock_client_month_repo.list_for_period = AsyncMock(return_value=[make_client_month()])
        mock_output_repo.list_for_client_period = AsyncMock(
            return_value=[
                make_output(output_type_id="type_banner", normal_count=3, express_count=2),
                make_output(output_type_id="type_video", normal_count=1),
            ]
        )

        # Act
        result = await use_case.execute(2024, 3)

        # Assert
        assert result.is_ok()
        assert len(result.value) == 1
        summary = result.value[0]
        assert summary.client_name == "Acme s.r.o."
        assert summary.brand_name == "Acme"
        assert summary.normal_credits == Decimal("11")
        assert summary.express_credits == Decimal("6")
        assert summary.used_credits == summary.normal_credits + summary.express_credits
        assert summary.remaining_credits == Decimal("33")
        assert summary.estimated_invoice == Decimal("25500")
        assert summary.item_count == 2

    async def test_overage_gives_negative_remaining(self, use_case, mock_client_month_repo, mock_output_repo):
        # Arrange
        mock_client_month_repo.list_for_period = AsyncMock(return_value=[make_client_month(max_credits="10")])
        mock_output_repo.list_for_client_period = AsyncMock(
            return_value=[make_output(output_type_id="type_video", normal_count=3)]
        )

        # Act
        result = await use_case.execute(2024, 3)

        # Assert
        summary = result.value[0]
        assert summary.used_credits == Decimal("15")
        assert summary.remaining_credits == Decimal("-5")

    async def test_outputs_of_unknown_type_cost_nothing(self, use_case, mock_client_month_repo, mock_output_repo):
        mock_client_month_repo.list_for_period = AsyncMock(return_value=[make_client_month()])
        mock_output_repo.list_for_client_period = AsyncMock(
            return_value=[make_output(output_type_id="type_retired", normal_count=4)]
        )

        result = await use_case.execute(2024, 3)

        assert result.value[0].used_credits == Decimal("0")
        assert result.value[0].item_count == 1

    async def test_clients_missing_from_directory_are_skipped(
        self, use_case, mock_client_month_repo, mock_output_repo, mock_client_directory
    ):
        # Arrange
        mock_client_month_repo.list_for_period = AsyncMock(
            return_value=[make_client_month(client_id="client_1"), make_client_month(client_id="client_gone")]
        )
        mock_output_repo.list_for_client_period = AsyncMock(return_value=[])
        mock_client_directory.get_by_id = AsyncMock(
            side_effect=lambda client_id: make_client(id=client_id) if client_id == "client_1" else None
        )

        # Act
        result = await use_case.execute(2024, 3)

        # Assert
        assert [s.client_id for s in result.value] == ["client_1"]

    async def test_repository_failure_returns_error(self, use_case, mock_client_month_repo):
        mock_client_month_repo.list_for_period = AsyncMock(side_effect=Exception("db down"))

        result = await use_case.execute(2024, 3)

        assert result.is_err()
        assert result.error.code == "SUMMARY_FAILED"


@pytest.mark.asyncio
class TestGetClientMonthSummaryByEngagementService:
    async def test_summary_through_engagement_service(
        self, mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        # Arrange
        mock_client_month_repo.get_by_engagement_service_period = AsyncMock(
            return_value=make_client_month(engagement_service_id="es_1")
        )
        mock_output_repo.list_for_client_period = AsyncMock(
            return_value=[make_output(output_type_id="type_banner", normal_count=5)]
        )
        use_case = GetClientMonthSummaryByEngagementService(
            mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
        )

        # Act
        result = await use_case.execute("es_1", 2024, 3)

        # Assert
        assert result.value.used_credits == Decimal("10")
        mock_client_month_repo.get_by_engagement_service_period.assert_called_once_with("es_1", 2024, 3)

    async def test_none_when_no_linked_client_month(
        self, mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        mock_client_month_repo.get_by_engagement_service_period = AsyncMock(return_value=None)
        use_case = GetClientMonthSummaryByEngagementService(
            mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
        )

        result = await use_case.execute("es_missing", 2024, 3)

        assert result.is_ok()
        assert result.value is None

    async def test_none_when_client_missing(
        self, mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        mock_client_month_repo.get_by_engagement_service_period = AsyncMock(return_value=make_client_month())
        mock_client_directory.get_by_id = AsyncMock(return_value=None)
        use_case = GetClientMonthSummaryByEngagementService(
            mock_client_month_repo, mock_output_repo, mock_output_type_repo, mock_client_directory
        )

        result = await use_case.execute("es_1", 2024, 3)

        assert result.value is None
