"""Survey dashboard: aggregation, filtering, paging and selection."""

from podsurvey.dashboard.aggregator import StatsTable, SurveyStats, aggregate, count_labels, rank
from podsurvey.dashboard.controller import DashboardController, DashboardView
from podsurvey.dashboard.filters import ALL, FilterState, apply_filters, available_labels
from podsurvey.dashboard.pagination import ITEMS_PER_PAGE, Paginator, count_pages
from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.dashboard.selection import SelectionSet

__all__ = [
    "ALL",
    "ITEMS_PER_PAGE",
    "DashboardController",
    "DashboardRegistry",
    "DashboardView",
    "FilterState",
    "Paginator",
    "SelectionSet",
    "StatsTable",
    "SurveyStats",
    "aggregate",
    "apply_filters",
    "available_labels",
    "count_labels",
    "count_pages",
    "rank",
]
