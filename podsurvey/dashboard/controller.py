"""Dashboard state and the operations that change it."""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel

from podsurvey.auth.identity import IdentityProvider
from podsurvey.dashboard.aggregator import SurveyStats, aggregate
from podsurvey.dashboard.filters import FilterState, apply_filters, available_labels
from podsurvey.dashboard.pagination import ITEMS_PER_PAGE, Paginator
from podsurvey.dashboard.selection import SelectionSet
from podsurvey.errors import StoreError
from podsurvey.schemas import SurveyRecord
from podsurvey.store import SurveyStore
from podsurvey.theme import ThemeState
from podsurvey.utils.logging import debug_log, error_log

logger = logging.getLogger("PodSurvey.dashboard")

LOGIN_PATH = "/login?admin"


class DashboardView(BaseModel):
    """Everything needed to render the dashboard once."""
    loading: bool
    load_error: Optional[str]
    delete_error: Optional[str]
    total_records: int
    filtered_count: int
    topic_filter: str
    format_filter: str
    search_term: str
    filters_active: bool
    topic_stats: List[Tuple[str, int]]
    format_stats: List[Tuple[str, int]]
    available_topics: List[str]
    available_formats: List[str]
    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    showing_from: int
    showing_to: int
    records: List[SurveyRecord]
    selected_ids: List[str]
    theme: str


class DashboardController:
    """
    Owns the state of one admin's dashboard.

    Collaborators are injected; the derived views (stats, filtered list,
    page) are recomputed explicitly after every mutation.
    """

    def __init__(
        self,
        store: SurveyStore,
        identity: IdentityProvider,
        session_id: Optional[str],
        theme: Optional[ThemeState] = None,
        items_per_page: int = ITEMS_PER_PAGE,
    ):
        self.store = store
        self.identity = identity
        self.session_id = session_id
        self.theme = theme or ThemeState()

        self.records: List[SurveyRecord] = []
        self.stats = SurveyStats()
        self.filter_state = FilterState()
        self.filtered: List[SurveyRecord] = []
        self.paginator = Paginator(items_per_page=items_per_page)
        self.selection = SelectionSet()
        self.loading = True
        self.loaded = False
        self.load_error: Optional[str] = None
        self.delete_error: Optional[str] = None
        self.redirect_to: Optional[str] = None

    # --- Loading ---

    async def load(self) -> bool:
        """
        Check the session and fetch all surveys.

        Returns False when there is no session; ``redirect_to`` is then set
        and no other state changes. A failed read keeps whatever was loaded
        before; only a failed first load leaves the dashboard empty. Reloads
        keep the filters, the selection and (clamped) the current page.
        """
        session = await self.identity.get_session(self.session_id)
        if session is None:
            logger.info("Dashboard load without session, redirecting to login")
            self.redirect_to = LOGIN_PATH
            return False

        self.loading = True
        try:
            records = await self.store.list()
        except StoreError as e:
            error_log("Error fetching surveys", exc=e, context={"session": self.session_id[:8]})
            self.load_error = "Could not load survey responses. Try refreshing the page."
            self.loading = False
            return True

        keep_page = self.loaded
        self.records = records
        self.load_error = None
        self.loaded = True
        self.loading = False
        self._recompute(keep_page=keep_page)
        debug_log("Dashboard loaded %d surveys", len(self.records))
        return True

    def _recompute(self, keep_page: bool = False) -> None:
        self.stats = aggregate(self.records)
        self._refilter(keep_page=keep_page)

    def _refilter(self, keep_page: bool = False) -> None:
        page = self.paginator.current_page
        self.filtered = apply_filters(self.records, self.filter_state)
        self.paginator.reset(len(self.filtered))
        if keep_page:
            self.paginator.go_to_page(page)

    # --- Filters ---

    def update_filters(
        self,
        topic: Optional[str] = None,
        podcast_format: Optional[str] = None,
        search: Optional[str] = None,
    ) -> None:
        self.filter_state = self.filter_state.updated(topic, podcast_format, search)
        self._refilter()

    def set_topic_filter(self, topic: str) -> None:
        self.update_filters(topic=topic)

    def set_format_filter(self, podcast_format: str) -> None:
        self.update_filters(podcast_format=podcast_format)

    def set_search_term(self, search: str) -> None:
        self.update_filters(search=search)

    def clear_filters(self) -> None:
        self.filter_state = self.filter_state.cleared()
        self._refilter()

    # --- Pagination ---

    @property
    def current_page(self) -> int:
        return self.paginator.current_page

    @property
    def total_pages(self) -> int:
        return self.paginator.total_pages

    @property
    def page_records(self) -> List[SurveyRecord]:
        return self.paginator.page_slice(self.filtered)

    def go_to_page(self, page: int) -> int:
        return self.paginator.go_to_page(page)

    def first_page(self) -> int:
        return self.paginator.first_page()

    def previous_page(self) -> int:
        return self.paginator.previous_page()

    def next_page(self) -> int:
        return self.paginator.next_page()

    def last_page(self) -> int:
        return self.paginator.last_page()

    # --- Selection ---

    def toggle_selection(self, record_id: str) -> bool:
        return self.selection.toggle(record_id)

    def mark(self, record_id: str) -> None:
        self.selection.mark(record_id)

    def unmark(self, record_id: str) -> None:
        self.selection.unmark(record_id)

    def clear_selection(self) -> None:
        self.selection.clear()

    def is_selected(self, record_id: str) -> bool:
        return record_id in self.selection

    # --- Delete / logout ---

    async def delete_selected(self) -> int:
        """
        Delete every selected survey from the store.

        On failure the error is logged, ``delete_error`` is set and local
        state is left exactly as it was. Returns the number of ids removed
        locally.
        """
        ids = self.selection.ids()
        if not ids:
            return 0

        try:
            await self.store.delete_by_ids(ids)
        except StoreError as e:
            error_log("Error deleting surveys", exc=e, context={"count": len(ids)})
            self.delete_error = "Could not delete the selected surveys."
            return 0

        doomed = set(ids)
        self.records = [record for record in self.records if record.id not in doomed]
        self.selection.discard_many(ids)
        self.delete_error = None
        self._recompute()
        logger.info(f"Deleted {len(ids)} surveys from dashboard")
        return len(ids)

    async def logout(self) -> None:
        await self.identity.sign_out(self.session_id)
        self.records = []
        self.filtered = []
        self.selection.clear()
        self.stats = SurveyStats()
        self.redirect_to = LOGIN_PATH

    # --- Rendering ---

    def view(self) -> DashboardView:
        showing_from, showing_to = self.paginator.bounds()
        return DashboardView(
            loading=self.loading,
            load_error=self.load_error,
            delete_error=self.delete_error,
            total_records=len(self.records),
            filtered_count=len(self.filtered),
            topic_filter=self.filter_state.topic,
            format_filter=self.filter_state.podcast_format,
            search_term=self.filter_state.search,
            filters_active=not self.filter_state.is_unconstrained,
            topic_stats=self.stats.ranked_topics(),
            format_stats=self.stats.ranked_formats(),
            available_topics=available_labels(self.records, "topics"),
            available_formats=available_labels(self.records, "podcast_formats"),
            current_page=self.paginator.current_page,
            total_pages=self.paginator.total_pages,
            has_previous=self.paginator.has_previous,
            has_next=self.paginator.has_next,
            showing_from=showing_from,
            showing_to=showing_to,
            records=self.page_records,
            selected_ids=self.selection.ids(),
            theme=self.theme.mode.value,
        )
