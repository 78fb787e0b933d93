"""Unit tests for AddCreativeBoostClient use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from creative_boost.app.use_cases.creative_boost import (
    AddCreativeBoostClient,
    AddCreativeBoostClientCommandDTO,
)
from creative_boost.domain import CreativeBoostClient


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()
    repo.get_by_client_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda client: client)
    return repo


@pytest.mark.asyncio
class TestAddCreativeBoostClient:
    async def test_defaults_fill_unset_values(self, mock_uow, mock_client_repo):
        """
        Given: No config exists for client_1
        When: The client is added with only a custom max
        Then: Min and price come from the package defaults
        """
        # Act
        result = await AddCreativeBoostClient(mock_uow, mock_client_repo).execute(
            AddCreativeBoostClientCommandDTO(client_id="client_1", default_max_credits=Decimal("70"))
        )

        # Assert
        assert result.is_ok()
        assert result.value.is_active is True
        assert result.value.default_min_credits == Decimal("30")
        assert result.value.default_max_credits == Decimal("70")
        assert result.value.default_price_per_credit == Decimal("1500")
        mock_uow.commit.assert_called_once()

    async def test_existing_config_is_returned_unchanged(self, mock_uow, mock_client_repo):
        existing = CreativeBoostClient(
            client_id="client_1",
            default_min_credits=Decimal("10"),
            default_max_credits=Decimal("20"),
            default_price_per_credit=Decimal("900"),
        )
        mock_client_repo.get_by_client_id = AsyncMock(return_value=existing)

        result = await AddCreativeBoostClient(mock_uow, mock_client_repo).execute(
            AddCreativeBoostClientCommandDTO(client_id="client_1", default_max_credits=Decimal("70"))
        )

        assert result.value.default_max_credits == Decimal("20")
        mock_client_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back(self, mock_uow, mock_client_repo):
        mock_client_repo.get_by_client_id = AsyncMock(side_effect=Exception("db down"))

        result = await AddCreativeBoostClient(mock_uow, mock_client_repo).execute(
            AddCreativeBoostClientCommandDTO(client_id="client_1")
        )

        assert result.is_err()
        assert result.error.code == "ADD_CLIENT_FAILED"
        mock_uow.rollback.assert_called_once()
