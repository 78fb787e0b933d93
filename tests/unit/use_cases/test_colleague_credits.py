"""Unit tests for the colleague credit use cases

Tests cover:
- Monthly and yearly totals
- Itemized detail with placeholders for unknown clients and types
- Per-client rewards with default and overridden reward per credit
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from creative_boost.app.use_cases.creative_boost.get_colleague_credits import (
    GetColleagueCredits,
    GetColleagueCreditsYear,
    GetColleagueCreditsDetail,
    GetColleagueCreditsByClient,
    UNKNOWN_CLIENT,
    UNKNOWN_OUTPUT_TYPE,
)
from tests.unit.factories import make_client, make_output, make_output_type


@pytest.fixture
def outputs():
    return [
        make_output(client_id="client_1", output_type_id="type_banner", normal_count=3, express_count=2),
        make_output(client_id="client_2", output_type_id="type_banner", normal_count=1),
        make_output(client_id="client_2", output_type_id="type_retired", normal_count=7),
    ]


@pytest.fixture
def mock_output_repo(outputs):
    repo = MagicMock()
    repo.list_for_colleague = AsyncMock(return_value=outputs)
    return repo


@pytest.fixture
def mock_output_type_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(return_value=[make_output_type(id="type_banner", name="Banner", base_credits="2")])
    return repo


@pytest.fixture
def mock_client_directory():
    directory = MagicMock()
    directory.get_by_id = AsyncMock(
        side_effect=lambda client_id: make_client(id=client_id, brand_name="Acme") if client_id == "client_1" else None
    )
    return directory


@pytest.mark.asyncio
class TestColleagueTotals:
    async def test_monthly_total(self, mock_output_repo, mock_output_type_repo):
        """
        Given: Colleague produced banner 3 + 2 express for client_1 and 1 banner for client_2
        When: Monthly credits are requested
        Then: total is 6 + 6 + 2 = 14; unknown output types add nothing
        """
        # Act
        result = await GetColleagueCredits(mock_output_repo, mock_output_type_repo).execute("col_1", 2024, 3)

        # Assert
        assert result.value.total_credits == Decimal("14")
        assert result.value.month == 3
        mock_output_repo.list_for_colleague.assert_called_once_with("col_1", year=2024, month=3)

    async def test_yearly_total(self, mock_output_repo, mock_output_type_repo):
        result = await GetColleagueCreditsYear(mock_output_repo, mock_output_type_repo).execute("col_1", 2024)

        assert result.value.total_credits == Decimal("14")
        assert result.value.month is None
        mock_output_repo.list_for_colleague.assert_called_once_with("col_1", year=2024)

    async def test_no_outputs_total_zero(self, mock_output_repo, mock_output_type_repo):
        mock_output_repo.list_for_colleague = AsyncMock(return_value=[])

        result = await GetColleagueCredits(mock_output_repo, mock_output_type_repo).execute("col_1", 2024, 3)

        assert result.value.total_credits == Decimal("0")


@pytest.mark.asyncio
class TestColleagueCreditsDetail:
    async def test_one_row_per_output_with_placeholders(
        self, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        # Act
        result = await GetColleagueCreditsDetail(
            mock_output_repo, mock_output_type_repo, mock_client_directory
        ).execute("col_1", year=2024, month=3)

        # Assert
        rows = result.value
        assert len(rows) == 3
        assert rows[0].client_name == "Acme"
        assert rows[0].output_type_name == "Banner"
        assert rows[0].total_credits == Decimal("12")
        assert rows[1].client_name == UNKNOWN_CLIENT
        assert rows[2].output_type_name == UNKNOWN_OUTPUT_TYPE
        assert rows[2].total_credits == Decimal("0")

    async def test_empty_brand_name_is_kept_for_known_client(
        self, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        """
        Given: client_1 exists in the directory but has no brand name
        When: Itemized credits are requested
        Then: The empty brand name is shown, the placeholder is only for missing clients
        """
        # Arrange
        mock_client_directory.get_by_id = AsyncMock(
            side_effect=lambda client_id: make_client(id=client_id, brand_name="") if client_id == "client_1" else None
        )

        # Act
        result = await GetColleagueCreditsDetail(
            mock_output_repo, mock_output_type_repo, mock_client_directory
        ).execute("col_1", year=2024, month=3)

        # Assert
        assert result.value[0].client_name == ""
        assert result.value[1].client_name == UNKNOWN_CLIENT


@pytest.mark.asyncio
class TestColleagueCreditsByClient:
    async def test_rewards_per_client(self, mock_output_repo, mock_output_type_repo, mock_client_directory):
        """
        Given: 12 credits on client_1 and 2 credits on client_2, client_2 rewarded 100 per credit
        When: Credits by client are requested
        Then: client_1 earns 12 * 80, client_2 earns 2 * 100
        """
        # Arrange
        use_case = GetColleagueCreditsByClient(
            mock_output_repo,
            mock_output_type_repo,
            mock_client_directory,
            reward_overrides={"client_2": Decimal("100")},
        )

        # Act
        result = await use_case.execute("col_1", 2024, 3)

        # Assert
        rows = {row.client_id: row for row in result.value}
        assert rows["client_1"].total_credits == Decimal("12")
        assert rows["client_1"].reward_per_credit == Decimal("80")
        assert rows["client_1"].total_reward == Decimal("960")
        assert rows["client_2"].total_credits == Decimal("2")
        assert rows["client_2"].total_reward == Decimal("200")
        assert rows["client_2"].client_name == UNKNOWN_CLIENT

    async def test_empty_brand_name_is_kept_for_known_client(
        self, mock_output_repo, mock_output_type_repo, mock_client_directory
    ):
        # Arrange
        mock_client_directory.get_by_id = AsyncMock(
            side_effect=lambda client_id: make_client(id=client_id, brand_name="") if client_id == "client_1" else None
        )

        # Act
        result = await GetColleagueCreditsByClient(
            mock_output_repo, mock_output_type_repo, mock_client_directory
        ).execute("col_1", 2024, 3)

        # Assert
        rows = {row.client_id: row for row in result.value}
        assert rows["client_1"].client_name == ""
        assert rows["client_2"].client_name == UNKNOWN_CLIENT
