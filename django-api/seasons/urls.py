from django.urls import path

from seasons.handlers import (
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

urlpatterns = [
    path("hosts/<str:host_id>/seasons", SeasonListView.as_view(), name="season-list"),
    path(
        "hosts/<str:host_id>/seasons/copy",
        SeasonCopyView.as_view(),
        name="season-copy",
    ),
    path(
        "hosts/<str:host_id>/seasons/coverage",
        SeasonCoverageView.as_view(),
        name="season-coverage",
    ),
    path(
        "hosts/<str:host_id>/seasons/validation",
        SeasonValidationView.as_view(),
        name="season-validation",
    ),
    path(
        "hosts/<str:host_id>/seasons/lookup",
        SeasonLookupView.as_view(),
        name="season-lookup",
    ),
    path(
        "hosts/<str:host_id>/seasons/rates",
        SeasonRatesView.as_view(),
        name="season-rates",
    ),
    path(
        "hosts/<str:host_id>/seasons/<str:season_id>",
        SeasonDetailView.as_view(),
        name="season-detail",
    ),
    path(
        "hosts/<str:host_id>/seasons/<str:season_id>/paint",
        SeasonPaintView.as_view(),
        name="season-paint",
    ),
    path(
        "hosts/<str:host_id>/seasons/<str:season_id>/remove-day",
        SeasonRemoveDayView.as_view(),
        name="season-remove-day",
    ),
]
