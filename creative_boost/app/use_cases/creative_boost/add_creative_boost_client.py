"""AddCreativeBoostClient Use Case

Registers a client's Creative Boost package defaults.
"""

import logging
from decimal import Decimal
from typing import Optional
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.creative_boost_client_repository import CreativeBoostClientRepository
from creative_boost.domain.creative_boost_client import CreativeBoostClient, PackageDefaults, DEFAULT_PACKAGE
from .dtos import AddCreativeBoostClientCommandDTO, CreativeBoostClientDTO

logger = logging.getLogger(__name__)


async def get_or_create_client_config(
    client_repo: CreativeBoostClientRepository,
    client_id: str,
    is_active: Optional[bool] = None,
    min_credits: Optional[Decimal] = None,
    max_credits: Optional[Decimal] = None,
    price_per_credit: Optional[Decimal] = None,
    package_defaults: PackageDefaults = DEFAULT_PACKAGE,
) -> tuple[CreativeBoostClient, bool]:
    """
    Return the client's config, creating it when missing.

    An existing config is returned unchanged. Does not commit.

    Returns:
        Tuple of (config, created)
    """
    existing = await client_repo.get_by_client_id(client_id)
    if existing:
        return existing, False

    client = CreativeBoostClient(
        client_id=client_id,
        is_active=True if is_active is None else is_active,
        default_min_credits=package_defaults.min_credits if min_credits is None else min_credits,
        default_max_credits=package_defaults.max_credits if max_credits is None else max_credits,
        default_price_per_credit=(
            package_defaults.price_per_credit if price_per_credit is None else price_per_credit
        ),
    )
    created = await client_repo.create(client)
    logger.info(f"Created Creative Boost config for client {client_id}")
    return created, True


class AddCreativeBoostClient:
    """
    Use Case: Register a client for Creative Boost

    Business Rules:
    1. Idempotent: an existing config is returned unchanged
    2. Unset defaults fall back to the package defaults (30 / 50 / 1500)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: CreativeBoostClientRepository,
        package_defaults: PackageDefaults = DEFAULT_PACKAGE,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.package_defaults = package_defaults

    async def execute(self, command: AddCreativeBoostClientCommandDTO) -> Result[CreativeBoostClientDTO]:
        try:
            client, created = await get_or_create_client_config(
                self.client_repo,
                command.client_id,
                is_active=command.is_active,
                min_credits=command.default_min_credits,
                max_credits=command.default_max_credits,
                price_per_credit=command.default_price_per_credit,
                package_defaults=self.package_defaults,
            )
            if created:
                await self.uow.commit()

            return Return.ok(CreativeBoostClientDTO.model_validate(client))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add Creative Boost client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="ADD_CLIENT_FAILED",
                    message="Failed to add Creative Boost client",
                    reason=str(e),
                )
            )
