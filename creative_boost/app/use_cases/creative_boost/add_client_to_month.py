"""AddClientToMonth Use Case

Adds a client to a month's credit ledger.
"""

import logging
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.creative_boost_client_repository import CreativeBoostClientRepository
from creative_boost.domain.client_month import ClientMonth, MonthStatus
from creative_boost.domain.creative_boost_client import PackageDefaults, DEFAULT_PACKAGE
from .add_creative_boost_client import get_or_create_client_config
from .dtos import AddClientToMonthCommandDTO, ClientMonthDTO, ClientMonthSettingsDTO

logger = logging.getLogger(__name__)


class AddClientToMonth:
    """
    Use Case: Add a client to a month's credit ledger

    Business Rules:
    1. Idempotency: an existing client month for (client_id, year, month) is
       returned unchanged; the new settings are ignored
    2. Field resolution: explicit settings, then the client's config
       defaults, then the package defaults
    3. A missing client config is created on the way, seeded from the
       explicit settings

    Flow:
    1. Get or create the client config
    2. Return the existing client month if there is one
    3. Resolve settings and create the client month
    4. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_month_repo: ClientMonthRepository,
        client_repo: CreativeBoostClientRepository,
        package_defaults: PackageDefaults = DEFAULT_PACKAGE,
    ):
        self.uow = uow
        self.client_month_repo = client_month_repo
        self.client_repo = client_repo
        self.package_defaults = package_defaults

    async def execute(self, command: AddClientToMonthCommandDTO) -> Result[ClientMonthDTO]:
        settings = command.settings or ClientMonthSettingsDTO()

        try:
            # Step 1: Client config
            client_config, config_created = await get_or_create_client_config(
                self.client_repo,
                command.client_id,
                min_credits=settings.min_credits,
                max_credits=settings.max_credits,
                price_per_credit=settings.price_per_credit,
                package_defaults=self.package_defaults,
            )

            # Step 2: Idempotency
            existing = await self.client_month_repo.get_by_client_period(
                command.client_id, command.year, command.month
            )
            if existing:
                if config_created:
                    await self.uow.commit()
                return Return.ok(ClientMonthDTO.model_validate(existing))

            # Step 3: Resolve settings and create
            client_month = ClientMonth(
                client_id=command.client_id,
                year=command.year,
                month=command.month,
                min_credits=(
                    settings.min_credits
                    if settings.min_credits is not None
                    else client_config.default_min_credits
                ),
                max_credits=(
                    settings.max_credits
                    if settings.max_credits is not None
                    else client_config.default_max_credits
                ),
                price_per_credit=(
                    settings.price_per_credit
                    if settings.price_per_credit is not None
                    else client_config.default_price_per_credit
                ),
                colleague_id=settings.colleague_id or "",
                status=settings.status or MonthStatus.ACTIVE,
                engagement_service_id=settings.engagement_service_id,
                engagement_id=settings.engagement_id,
            )
            created = await self.client_month_repo.create(client_month)

            # Step 4: Commit
            await self.uow.commit()

            logger.info(
                f"Added client {command.client_id} to {command.year}-{command.month:02d} "
                f"(max_credits={created.max_credits}, price_per_credit={created.price_per_credit})"
            )
            return Return.ok(ClientMonthDTO.model_validate(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Failed to add client {command.client_id} to {command.year}-{command.month:02d}: {e}"
            )
            return Return.err(
                Error(
                    code="ADD_CLIENT_TO_MONTH_FAILED",
                    message="Failed to add client to month",
                    reason=str(e),
                )
            )
