"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from seasons.cache_keys import season_list_key
from seasons.domain.errors import DomainError, ErrorCode
from seasons.domain.year_copy import CopyPolicy
from seasons.handlers.serializers import (
    CopyResultSerializer,
    CopyYearSerializer,
    CoverageSerializer,
    DateQuerySerializer,
    OverlapSerializer,
    PaintSerializer,
    RatesRequestSerializer,
    RatesSerializer,
    RemoveDaySerializer,
    RequiredYearQuerySerializer,
    SeasonCreateSerializer,
    SeasonSerializer,
    SeasonUpdateSerializer,
    YearQuerySerializer,
)
from seasons.services.season_service import SeasonService
from seasons.stores.django_store import DjangoSeasonStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.SEASON_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SEASON_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


def get_season_service() -> SeasonService:
    return SeasonService(DjangoSeasonStore())


def error_response(error: DomainError) -> Response:
    code = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    logger.info("Request rejected with %s", error.code.value)
    return Response({"code": error.code.value, "message": error.message}, status=code)


def season_list_response(seasons) -> list:
    ordered = sorted(seasons.values(), key=lambda s: (s.year, s.id))
    return SeasonSerializer(ordered, many=True).data


class SeasonListView(APIView):
    """Handler for GET/POST /api/hosts/{host_id}/seasons"""

    def get(self, request: Request, host_id: str) -> Response:
        query = YearQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        year = query.validated_data.get("year")

        key = season_list_key(host_id, year)
        data = cache.get(key)
        if data is None:
            try:
                seasons = get_season_service().list_seasons(host_id, year)
            except DomainError as exc:
                return error_response(exc)
            data = season_list_response(seasons)
            cache.set(key, data, timeout=settings.SEASONS_CACHE_TIMEOUT)
        return Response(data)

    def post(self, request: Request, host_id: str) -> Response:
        body = SeasonCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            season = get_season_service().create_season(host_id, **body.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(SeasonSerializer(season).data, status=status.HTTP_201_CREATED)


class SeasonDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/hosts/{host_id}/seasons/{season_id}"""

    def get(self, request: Request, host_id: str, season_id: str) -> Response:
        try:
            season = get_season_service().get_season(host_id, season_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(SeasonSerializer(season).data)

    def patch(self, request: Request, host_id: str, season_id: str) -> Response:
        body = SeasonUpdateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            season = get_season_service().update_season(
                host_id, season_id, **body.validated_data
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(SeasonSerializer(season).data)

    def delete(self, request: Request, host_id: str, season_id: str) -> Response:
        try:
            get_season_service().delete_season(host_id, season_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SeasonPaintView(APIView):
    """Handler for POST /api/hosts/{host_id}/seasons/{season_id}/paint"""

    def post(self, request: Request, host_id: str, season_id: str) -> Response:
        body = PaintSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            seasons = get_season_service().paint_range(
                host_id,
                season_id,
                body.validated_data["start"],
                body.validated_data["end"],
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(season_list_response(seasons))


class SeasonRemoveDayView(APIView):
    """Handler for POST /api/hosts/{host_id}/seasons/{season_id}/remove-day"""

    def post(self, request: Request, host_id: str, season_id: str) -> Response:
        body = RemoveDaySerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            season = get_season_service().remove_day(
                host_id, season_id, body.validated_data["day"]
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(SeasonSerializer(season).data)


class SeasonCopyView(APIView):
    """Handler for POST /api/hosts/{host_id}/seasons/copy"""

    def post(self, request: Request, host_id: str) -> Response:
        body = CopyYearSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        policy = (
            CopyPolicy.OVERWRITE
            if body.validated_data["overwrite"]
            else CopyPolicy.SKIP_EXISTING
        )
        try:
            result = get_season_service().copy_year(
                host_id,
                body.validated_data["from_year"],
                body.validated_data["to_year"],
                policy,
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(CopyResultSerializer(result).data)


class SeasonCoverageView(APIView):
    """Handler for GET /api/hosts/{host_id}/seasons/coverage"""

    def get(self, request: Request, host_id: str) -> Response:
        query = RequiredYearQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            report = get_season_service().coverage(host_id, query.validated_data["year"])
        except DomainError as exc:
            return error_response(exc)
        return Response(CoverageSerializer(report).data)


class SeasonValidationView(APIView):
    """Handler for GET /api/hosts/{host_id}/seasons/validation"""

    def get(self, request: Request, host_id: str) -> Response:
        query = RequiredYearQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            overlaps = get_season_service().validate(host_id, query.validated_data["year"])
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "valid": not overlaps,
                "overlaps": OverlapSerializer(overlaps, many=True).data,
            }
        )


class SeasonLookupView(APIView):
    """Handler for GET /api/hosts/{host_id}/seasons/lookup"""

    def get(self, request: Request, host_id: str) -> Response:
        query = DateQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data["date"]
        try:
            season = get_season_service().season_for_date(host_id, day)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {"date": day, "season": SeasonSerializer(season).data if season else None}
        )


class SeasonRatesView(APIView):
    """Handler for POST /api/hosts/{host_id}/seasons/rates"""

    def post(self, request: Request, host_id: str) -> Response:
        body = RatesRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        data = body.validated_data
        try:
            rates = get_season_service().rates_for_date(
                host_id,
                data["date"],
                data["prices"],
                data["default_price"],
                data["min_stays"],
                data["default_min_stay"],
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(RatesSerializer(rates).data)
