from fastapi import APIRouter, Query

from app.dependencies import CurrentUserId, StatsServiceDep
from app.stats.schemas import StatsOverview, TotalsSummary

router = APIRouter()


@router.get("/summary", response_model=TotalsSummary)
async def get_summary(
    service: StatsServiceDep,
    user_id: CurrentUserId,
) -> TotalsSummary:
    """All-time income, expense and balance totals."""
    return await service.get_summary(user_id)


@router.get("/analytics", response_model=StatsOverview)
async def get_analytics(
    service: StatsServiceDep,
    user_id: CurrentUserId,
    period: str | None = Query(default="Month", description="Week, Month, Quarter or Year"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> StatsOverview:
    """Period summary, comparison with the previous period, and trailing trends."""
    return await service.get_analytics(user_id, period, start_date, end_date)
