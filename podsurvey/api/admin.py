"""Admin API endpoints."""

import logging
from datetime import datetime
from typing import List, Optional

from litestar import Controller, Request, get, post
from litestar.exceptions import HTTPException
from litestar.status_codes import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE
from pydantic import BaseModel, Field

from podsurvey.auth.identity import SESSION_COOKIE, require_admin_guard
from podsurvey.dashboard.aggregator import aggregate, rank
from podsurvey.dashboard.controller import DashboardView
from podsurvey.dashboard.filters import ALL, FilterState, apply_filters
from podsurvey.dashboard.pagination import Paginator
from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.errors import StoreError
from podsurvey.schemas import SurveyRecord
from podsurvey.store import SurveyStore
from podsurvey.theme import ThemeState

logger = logging.getLogger("PodSurvey.admin")


# --- Request/Response Schemas ---

class SurveyListItem(BaseModel):
    """Survey list item."""
    id: str
    name: str
    display_name: str
    topics: List[str]
    description: str
    podcast_formats: List[str]
    suggested_guest: Optional[str]
    created_at: datetime

    @classmethod
    def from_record(cls, record: SurveyRecord) -> "SurveyListItem":
        return cls(
            id=record.id,
            name=record.name,
            display_name=record.display_name,
            topics=list(record.topics),
            description=record.description,
            podcast_formats=list(record.podcast_formats),
            suggested_guest=record.suggested_guest,
            created_at=record.created_at,
        )


class SurveyPage(BaseModel):
    """One page of filtered surveys."""
    items: List[SurveyListItem]
    total: int
    filtered: int
    page: int
    total_pages: int
    per_page: int


class StatsEntry(BaseModel):
    label: str
    count: int


class StatsResponse(BaseModel):
    """Topic and format frequencies."""
    total_surveys: int
    topics: List[StatsEntry]
    podcast_formats: List[StatsEntry]


class BulkDeleteRequest(BaseModel):
    """Surveys to delete."""
    ids: List[str] = Field(..., min_length=1)


class BulkDeleteResponse(BaseModel):
    deleted: int


# --- Controller ---

class AdminController(Controller):
    """API endpoints for the admin dashboard."""

    path = "/api/admin"
    tags = ["admin"]
    guards = [require_admin_guard]

    async def _load(self, store: SurveyStore) -> List[SurveyRecord]:
        try:
            return await store.list()
        except StoreError as e:
            logger.exception(f"Database error fetching surveys: {e}")
            raise HTTPException(
                detail="Could not load surveys",
                status_code=HTTP_503_SERVICE_UNAVAILABLE,
            )

    @get("/surveys")
    async def list_surveys(
        self,
        store: SurveyStore,
        topic: str = ALL,
        podcast_format: str = ALL,
        search: str = "",
        page: int = 1,
    ) -> SurveyPage:
        """Filtered, paginated surveys, newest first."""
        records = await self._load(store)
        filtered = apply_filters(records, FilterState(topic=topic, podcast_format=podcast_format, search=search))
        paginator = Paginator(total_items=len(filtered))
        paginator.go_to_page(page)

        return SurveyPage(
            items=[SurveyListItem.from_record(r) for r in paginator.page_slice(filtered)],
            total=len(records),
            filtered=len(filtered),
            page=paginator.current_page,
            total_pages=paginator.total_pages,
            per_page=paginator.items_per_page,
        )

    @get("/stats")
    async def get_stats(self, store: SurveyStore) -> StatsResponse:
        """Topic and format counts over all surveys."""
        records = await self._load(store)
        stats = aggregate(records)
        return StatsResponse(
            total_surveys=len(records),
            topics=[StatsEntry(label=label, count=count) for label, count in rank(stats.topics)],
            podcast_formats=[StatsEntry(label=label, count=count) for label, count in rank(stats.podcast_formats)],
        )

    @post("/surveys/delete", status_code=HTTP_200_OK)
    async def delete_surveys(
        self,
        data: BulkDeleteRequest,
        store: SurveyStore,
    ) -> BulkDeleteResponse:
        """Delete several surveys at once."""
        try:
            deleted = await store.delete_by_ids(data.ids)
        except StoreError as e:
            logger.exception(f"Error deleting surveys: {e}")
            raise HTTPException(
                detail=f"Could not delete surveys: {e}",
                status_code=HTTP_503_SERVICE_UNAVAILABLE,
            )
        return BulkDeleteResponse(deleted=deleted)

    @get("/dashboard")
    async def dashboard_state(
        self,
        request: Request,
        dashboards: DashboardRegistry,
        theme: ThemeState,
    ) -> DashboardView:
        """The caller's dashboard state as JSON."""
        controller = await dashboards.open(request.cookies.get(SESSION_COOKIE), theme=theme, reload=True)
        return controller.view()
