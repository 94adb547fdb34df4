from seasons.handlers.views import (
    SeasonCopyView,
    SeasonCoverageView,
    SeasonDetailView,
    SeasonListView,
    SeasonLookupView,
    SeasonPaintView,
    SeasonRatesView,
    SeasonRemoveDayView,
    SeasonValidationView,
)

__all__ = [
    "SeasonListView",
    "SeasonDetailView",
    "SeasonPaintView",
    "SeasonRemoveDayView",
    "SeasonCopyView",
    "SeasonCoverageView",
    "SeasonValidationView",
    "SeasonLookupView",
    "SeasonRatesView",
]
