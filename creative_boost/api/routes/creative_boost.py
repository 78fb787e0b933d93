"""Creative Boost API Routes

FastAPI routes for the credit ledger, output log, colleague credits and
engagement sync.
"""

import base64
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from creative_boost.api.dependencies import get_actor, get_config
from creative_boost.api.error import ClientError, not_found
from creative_boost.api.schemas.creative_boost_request import (
    OutputTypeCreateRequestSchema,
    OutputTypeUpdateRequestSchema,
    CalculateCreditsRequestSchema,
    CreativeBoostClientRequestSchema,
    ClientMonthCreateRequestSchema,
    ClientMonthUpdateRequestSchema,
    OutputUpdateRequestSchema,
)
from creative_boost.app.use_cases.creative_boost import (
    AddOutputType,
    UpdateOutputType,
    ListOutputTypes,
    GetOutputType,
    CalculateOutputCredits,
    AddCreativeBoostClient,
    AddClientToMonth,
    RemoveClientFromMonth,
    UpdateClientMonth,
    GetClientsForMonth,
    GetAvailableClientsForMonth,
    GetClientMonth,
    GetClientMonthByEngagementService,
    UpdateClientOutput,
    GetClientOutputs,
    GetClientMonthSummaries,
    GetClientMonthSummaryByEngagementService,
    GetColleagueCredits,
    GetColleagueCreditsYear,
    GetColleagueCreditsDetail,
    GetColleagueCreditsByClient,
    GetSettingsHistory,
    EnsureClientMonthsForActiveEngagements,
    GenerateMonthStatement,
)
from creative_boost.app.use_cases.creative_boost.dtos import (
    ActorDTO,
    OutputTypeDTO,
    AddOutputTypeCommandDTO,
    UpdateOutputTypeCommandDTO,
    CalculateCreditsCommandDTO,
    OutputCreditsDTO,
    CreativeBoostClientDTO,
    AddCreativeBoostClientCommandDTO,
    ClientMonthSettingsDTO,
    AddClientToMonthCommandDTO,
    ClientMonthDTO,
    ClientMonthPatchDTO,
    UpdateClientMonthCommandDTO,
    RemoveClientFromMonthResponseDTO,
    ClientMonthOutputDTO,
    OutputPatchDTO,
    UpdateClientOutputCommandDTO,
    ClientMonthSummaryDTO,
    ColleagueCreditsDTO,
    ColleagueCreditDetailDTO,
    ColleagueClientCreditsDTO,
    SettingsChangeDTO,
    SyncResultDTO,
    MonthStatementResponseDTO,
)
from creative_boost.adapter.repositories import (
    SqlAlchemyOutputTypeRepository,
    SqlAlchemyCreativeBoostClientRepository,
    SqlAlchemyClientMonthRepository,
    SqlAlchemyClientMonthOutputRepository,
    SqlAlchemySettingsChangeRepository,
    SqlAlchemyClientDirectoryRepository,
    SqlAlchemyEngagementDirectoryRepository,
)
from creative_boost.adapter.services.pdf_service import ReportLabStatementPdfService
from creative_boost.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from creative_boost.domain.base import utcnow
from creative_boost.domain.creative_boost_client import PackageDefaults
from creative_boost.depends import get_session

router = APIRouter(prefix="/creative-boost", tags=["Creative Boost"])

YEAR_QUERY = Query(..., ge=2000, le=2100, description="Calendar year")
MONTH_QUERY = Query(..., ge=1, le=12, description="Calendar month")

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Not found",
        "content": {
            "application/json": {
                "example": {"error": {"code": "NOT_FOUND", "message": "Client month not found"}}
            }
        },
    }
}


# ---------------------------------------------------------------------------
# Output type catalog
# ---------------------------------------------------------------------------


@router.get("/output-types", response_model=List[OutputTypeDTO])
async def list_output_types(
    active_only: bool = Query(default=False, description="Only types offered for new output entry"),
    session: AsyncSession = Depends(get_session),
):
    """List the output type catalog ordered by name."""
    result = await ListOutputTypes(SqlAlchemyOutputTypeRepository(session)).execute(active_only)
    return result.value


@router.get("/output-types/{output_type_id}", response_model=OutputTypeDTO, responses=NOT_FOUND_RESPONSE)
async def get_output_type(output_type_id: str, session: AsyncSession = Depends(get_session)):
    result = await GetOutputType(SqlAlchemyOutputTypeRepository(session)).execute(output_type_id)
    if result.value is None:
        raise not_found(f"Output type {output_type_id} not found")
    return result.value


@router.post("/output-types", response_model=OutputTypeDTO, status_code=status.HTTP_201_CREATED)
async def add_output_type(
    request: OutputTypeCreateRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    command = AddOutputTypeCommandDTO(**request.model_dump())

    result = await AddOutputType(uow, SqlAlchemyOutputTypeRepository(session)).execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.patch("/output-types/{output_type_id}", response_model=OutputTypeDTO, responses=NOT_FOUND_RESPONSE)
async def update_output_type(
    output_type_id: str,
    request: OutputTypeUpdateRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Partially update an output type.

    Deactivate a type with `{"is_active": false}`; output types are never
    deleted so historical outputs keep their credit value.
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = UpdateOutputTypeCommandDTO(**request.model_dump(exclude_unset=True))

    result = await UpdateOutputType(uow, SqlAlchemyOutputTypeRepository(session)).execute(
        output_type_id, command
    )

    if result.is_err():
        if result.error.code == "OUTPUT_TYPE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)
    return result.value


@router.post("/credits/calculate", response_model=OutputCreditsDTO)
async def calculate_credits(
    request: CalculateCreditsRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Calculate credits for a number of pieces of one output type.

    `normal = normal_count * base_credits`, `express = express_count *
    base_credits * 1.5`. Unknown output types cost 0 credits.

    **Example request:**
    ```json
    {"output_type_id": "0b6c...", "normal_count": 3, "express_count": 2}
    ```
    """
    command = CalculateCreditsCommandDTO(**request.model_dump())
    result = await CalculateOutputCredits(SqlAlchemyOutputTypeRepository(session)).execute(command)
    return result.value


# ---------------------------------------------------------------------------
# Client configs
# ---------------------------------------------------------------------------


@router.post("/clients", response_model=CreativeBoostClientDTO)
async def add_creative_boost_client(
    request: CreativeBoostClientRequestSchema,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Register a client's package defaults. Returns the existing config if there is one."""
    uow = SqlAlchemyUnitOfWork(session)
    command = AddCreativeBoostClientCommandDTO(**request.model_dump())

    use_case = AddCreativeBoostClient(
        uow,
        SqlAlchemyCreativeBoostClientRepository(session),
        package_defaults=PackageDefaults.from_config(config),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


# ---------------------------------------------------------------------------
# Client months
# ---------------------------------------------------------------------------


@router.get("/client-months", response_model=List[ClientMonthSummaryDTO])
async def get_client_month_summaries(
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
):
    """
    Monthly overview: one summary per client on the month's ledger.

    Summaries are recomputed from the output log on every request.
    `remaining_credits` is negative when a client went over its maximum.
    """
    use_case = GetClientMonthSummaries(
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyClientMonthOutputRepository(session),
        SqlAlchemyOutputTypeRepository(session),
        SqlAlchemyClientDirectoryRepository(session),
    )
    result = await use_case.execute(year, month)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return result.value


@router.get("/client-months/client-ids", response_model=List[str])
async def get_clients_for_month(
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
):
    result = await GetClientsForMonth(SqlAlchemyClientMonthRepository(session)).execute(year, month)
    return result.value


@router.get("/client-months/available-clients", response_model=List[CreativeBoostClientDTO])
async def get_available_clients_for_month(
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
):
    """Active configured clients that are not on the month's ledger yet."""
    use_case = GetAvailableClientsForMonth(
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyCreativeBoostClientRepository(session),
    )
    result = await use_case.execute(year, month)
    return result.value


@router.get(
    "/client-months/by-engagement-service/{engagement_service_id}/summary",
    response_model=ClientMonthSummaryDTO,
    responses=NOT_FOUND_RESPONSE,
)
async def get_client_month_summary_by_engagement_service(
    engagement_service_id: str,
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetClientMonthSummaryByEngagementService(
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyClientMonthOutputRepository(session),
        SqlAlchemyOutputTypeRepository(session),
        SqlAlchemyClientDirectoryRepository(session),
    )
    result = await use_case.execute(engagement_service_id, year, month)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if result.value is None:
        raise not_found(f"No client month for engagement service {engagement_service_id}")
    return result.value


@router.get(
    "/client-months/by-engagement-service/{engagement_service_id}",
    response_model=ClientMonthDTO,
    responses=NOT_FOUND_RESPONSE,
)
async def get_client_month_by_engagement_service(
    engagement_service_id: str,
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetClientMonthByEngagementService(SqlAlchemyClientMonthRepository(session))
    result = await use_case.execute(engagement_service_id, year, month)

    if result.value is None:
        raise not_found(f"No client month for engagement service {engagement_service_id}")
    return result.value


@router.post("/client-months", response_model=ClientMonthDTO)
async def add_client_to_month(
    request: ClientMonthCreateRequestSchema,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Add a client to a month's credit ledger.

    Idempotent: if the client is already on the month, the existing client
    month is returned unchanged and the submitted settings are ignored.
    Omitted settings fall back to the client's defaults, then to the
    configured package (30 / 50 / 1500).

    **Returns:**
    - 200: Client month (new or existing)
    - 422: Invalid request parameters
    """
    uow = SqlAlchemyUnitOfWork(session)
    settings = ClientMonthSettingsDTO(
        **request.model_dump(exclude={"client_id", "year", "month"}, exclude_unset=True)
    )
    command = AddClientToMonthCommandDTO(
        client_id=request.client_id,
        year=request.year,
        month=request.month,
        settings=settings,
    )

    use_case = AddClientToMonth(
        uow,
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyCreativeBoostClientRepository(session),
        package_defaults=PackageDefaults.from_config(config),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.patch(
    "/client-months/{client_month_id}",
    response_model=Optional[ClientMonthDTO],
    responses=NOT_FOUND_RESPONSE,
)
async def update_client_month(
    client_month_id: str,
    request: ClientMonthUpdateRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: ActorDTO = Depends(get_actor),
    config=Depends(get_config),
):
    """
    Update a client month's settings.

    Changes of `max_credits`, `price_per_credit` and `status` are appended
    to the settings history under the calling actor (`X-Actor-Id`,
    `X-Actor-Name` headers) in the same transaction.

    **Returns:**
    - 200: Updated client month (`null` for an unknown id when strict updates are off)
    - 401: Missing actor headers
    - 404: Unknown client month (strict updates only)
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = UpdateClientMonthCommandDTO(
        client_month_id=client_month_id,
        patch=ClientMonthPatchDTO(**request.model_dump(exclude_unset=True)),
        actor=actor,
    )

    use_case = UpdateClientMonth(
        uow,
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemySettingsChangeRepository(session),
        strict=config.STRICT_CLIENT_MONTH_UPDATES,
    )
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "CLIENT_MONTH_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)
    return result.value


@router.get(
    "/client-months/{client_id}/{year}/{month}",
    response_model=ClientMonthDTO,
    responses=NOT_FOUND_RESPONSE,
)
async def get_client_month(
    client_id: str,
    year: int,
    month: int,
    session: AsyncSession = Depends(get_session),
):
    result = await GetClientMonth(SqlAlchemyClientMonthRepository(session)).execute(client_id, year, month)
    if result.value is None:
        raise not_found(f"Client {client_id} is not on the ledger for {year}-{month:02d}")
    return result.value


@router.delete("/client-months/{client_id}/{year}/{month}", response_model=RemoveClientFromMonthResponseDTO)
async def remove_client_from_month(
    client_id: str,
    year: int,
    month: int,
    session: AsyncSession = Depends(get_session),
):
    """Remove a client from a month together with all of its logged outputs."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RemoveClientFromMonth(
        uow,
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyClientMonthOutputRepository(session),
    )
    result = await use_case.execute(client_id, year, month)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


def _statement_use_case(session: AsyncSession, config) -> GenerateMonthStatement:
    return GenerateMonthStatement(
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyClientMonthOutputRepository(session),
        SqlAlchemyOutputTypeRepository(session),
        SqlAlchemyClientDirectoryRepository(session),
        ReportLabStatementPdfService(),
        company_name=config.STATEMENT_COMPANY_NAME,
        company_address=config.STATEMENT_COMPANY_ADDRESS,
    )


@router.get(
    "/client-months/{client_id}/{year}/{month}/statement",
    response_model=MonthStatementResponseDTO,
    responses=NOT_FOUND_RESPONSE,
)
async def get_month_statement(
    client_id: str,
    year: int,
    month: int,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Monthly statement: summary, per-output-type lines and the PDF as base64."""
    result = await _statement_use_case(session, config).execute(client_id, year, month)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if result.value is None:
        raise not_found(f"Client {client_id} is not on the ledger for {year}-{month:02d}")
    return result.value


@router.get(
    "/client-months/{client_id}/{year}/{month}/statement/pdf",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF document"},
        **NOT_FOUND_RESPONSE,
    },
)
async def download_month_statement_pdf(
    client_id: str,
    year: int,
    month: int,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Download the monthly statement as a PDF file."""
    result = await _statement_use_case(session, config).execute(client_id, year, month)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if result.value is None:
        raise not_found(f"Client {client_id} is not on the ledger for {year}-{month:02d}")

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=statement_{client_id}_{year}_{month:02d}.pdf"
        },
    )


# ---------------------------------------------------------------------------
# Output log
# ---------------------------------------------------------------------------


@router.get("/outputs/{client_id}/{year}/{month}", response_model=List[ClientMonthOutputDTO])
async def get_client_outputs(
    client_id: str,
    year: int,
    month: int,
    session: AsyncSession = Depends(get_session),
):
    result = await GetClientOutputs(SqlAlchemyClientMonthOutputRepository(session)).execute(
        client_id, year, month
    )
    return result.value


@router.put(
    "/outputs/{client_id}/{output_type_id}/{year}/{month}",
    response_model=Optional[ClientMonthOutputDTO],
)
async def update_client_output(
    client_id: str,
    output_type_id: str,
    year: int,
    month: int,
    request: OutputUpdateRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Set a client's production counts for one output type.

    Omitted fields keep their current value. When both counts end up at 0
    the output row is removed and `null` is returned.

    **Example request:**
    ```json
    {"normal_count": 3, "express_count": 1, "colleague_id": "col_7"}
    ```
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = UpdateClientOutputCommandDTO(
        client_id=client_id,
        output_type_id=output_type_id,
        year=year,
        month=month,
        patch=OutputPatchDTO(**request.model_dump(exclude_unset=True)),
    )

    result = await UpdateClientOutput(uow, SqlAlchemyClientMonthOutputRepository(session)).execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


# ---------------------------------------------------------------------------
# Colleague credits
# ---------------------------------------------------------------------------


@router.get("/colleagues/{colleague_id}/credits", response_model=ColleagueCreditsDTO)
async def get_colleague_credits(
    colleague_id: str,
    year: int = YEAR_QUERY,
    month: Optional[int] = Query(default=None, ge=1, le=12, description="Omit for the whole year"),
    session: AsyncSession = Depends(get_session),
):
    """Total credits produced by a colleague in a month, or in a whole year when `month` is omitted."""
    output_repo = SqlAlchemyClientMonthOutputRepository(session)
    output_type_repo = SqlAlchemyOutputTypeRepository(session)

    if month is None:
        result = await GetColleagueCreditsYear(output_repo, output_type_repo).execute(colleague_id, year)
    else:
        result = await GetColleagueCredits(output_repo, output_type_repo).execute(colleague_id, year, month)
    return result.value


@router.get("/colleagues/{colleague_id}/credits/detail", response_model=List[ColleagueCreditDetailDTO])
async def get_colleague_credits_detail(
    colleague_id: str,
    year: Optional[int] = Query(default=None, ge=2000, le=2100),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetColleagueCreditsDetail(
        SqlAlchemyClientMonthOutputRepository(session),
        SqlAlchemyOutputTypeRepository(session),
        SqlAlchemyClientDirectoryRepository(session),
    )
    result = await use_case.execute(colleague_id, year=year, month=month)
    return result.value


@router.get("/colleagues/{colleague_id}/credits/by-client", response_model=List[ColleagueClientCreditsDTO])
async def get_colleague_credits_by_client(
    colleague_id: str,
    year: int = YEAR_QUERY,
    month: int = MONTH_QUERY,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Credits of a colleague per client with the resulting reward (`total_credits * reward_per_credit`)."""
    use_case = GetColleagueCreditsByClient(
        SqlAlchemyClientMonthOutputRepository(session),
        SqlAlchemyOutputTypeRepository(session),
        SqlAlchemyClientDirectoryRepository(session),
        default_reward_per_credit=Decimal(str(config.DEFAULT_REWARD_PER_CREDIT)),
        reward_overrides={
            client_id: Decimal(str(value)) for client_id, value in config.COLLEAGUE_REWARD_OVERRIDES.items()
        },
    )
    result = await use_case.execute(colleague_id, year, month)
    return result.value


# ---------------------------------------------------------------------------
# Settings history and engagement sync
# ---------------------------------------------------------------------------


@router.get("/settings-history/{client_id}", response_model=List[SettingsChangeDTO])
async def get_settings_history(
    client_id: str,
    year: Optional[int] = Query(default=None, ge=2000, le=2100),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    session: AsyncSession = Depends(get_session),
):
    """Settings changes of a client, newest first."""
    result = await GetSettingsHistory(SqlAlchemySettingsChangeRepository(session)).execute(
        client_id, year=year, month=month
    )
    return result.value


@router.post(
    "/sync/engagements",
    response_model=SyncResultDTO,
    responses={
        500: {
            "description": "Sync failed",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ENGAGEMENT_SYNC_FAILED",
                            "message": "Failed to sync client months with engagements",
                        }
                    }
                }
            },
        }
    },
)
async def sync_engagements(
    year: Optional[int] = Query(default=None, ge=2000, le=2100, description="Defaults to the current year"),
    month: Optional[int] = Query(default=None, ge=1, le=12, description="Defaults to the current month"),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Ensure every active engagement with a Creative Boost billing line has a
    client month for the given month.

    Idempotent; new client months carry forward the previous month's
    settings of the same billing line.
    """
    now = utcnow()
    uow = SqlAlchemyUnitOfWork(session)

    use_case = EnsureClientMonthsForActiveEngagements(
        uow,
        SqlAlchemyClientMonthRepository(session),
        SqlAlchemyCreativeBoostClientRepository(session),
        SqlAlchemyEngagementDirectoryRepository(session),
        service_id=config.CREATIVE_BOOST_SERVICE_ID,
        package_defaults=PackageDefaults.from_config(config),
    )
    result = await use_case.execute(year or now.year, month or now.month)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return result.value
