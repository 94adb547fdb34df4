"""Serializers for request input and domain model responses."""

from rest_framework import serializers


class DateRangeSerializer(serializers.Serializer):
    start = serializers.CharField()
    end = serializers.CharField()


class SeasonSerializer(serializers.Serializer):
    """Serializer for the Season domain model."""

    id = serializers.CharField()
    year = serializers.IntegerField()
    name = serializers.CharField()
    color = serializers.CharField()
    date_ranges = DateRangeSerializer(many=True)


class CoverageSerializer(serializers.Serializer):
    """Serializer for the CoverageReport domain model."""

    year = serializers.IntegerField()
    total_days = serializers.IntegerField()
    day_counts = serializers.DictField(child=serializers.IntegerField())
    assigned_days = serializers.IntegerField()
    unassigned_days = serializers.IntegerField()
    integrity_warning = serializers.BooleanField()


class OverlapSerializer(serializers.Serializer):
    first_season_id = serializers.CharField()
    second_season_id = serializers.CharField()
    days = serializers.ListField(child=serializers.CharField())


class CopyResultSerializer(serializers.Serializer):
    created = serializers.ListField(child=serializers.CharField())
    overwritten = serializers.ListField(child=serializers.CharField())
    skipped = serializers.ListField(child=serializers.CharField())
    seasons = serializers.SerializerMethodField()

    def get_seasons(self, result) -> list[dict]:
        written = [result.seasons[season_id] for season_id in result.written]
        return SeasonSerializer(written, many=True).data



class RatesSerializer(serializers.Serializer):
    """Serializer for the Rates domain model."""

    day = serializers.CharField()
    nightly_price = serializers.FloatField()
    min_stay = serializers.IntegerField()

# Request bodies and query strings


class YearQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(required=False)


class RequiredYearQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField()


class DateQuerySerializer(serializers.Serializer):
    date = serializers.CharField()


class SeasonCreateSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    name = serializers.CharField(max_length=255)
    color = serializers.CharField(required=False)


class SeasonUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    color = serializers.CharField(required=False)


class PaintSerializer(serializers.Serializer):
    """Two clicked days, in either order."""

    start = serializers.CharField()
    end = serializers.CharField()

    def validate(self, attrs):
        start, end = attrs["start"], attrs["end"]
        attrs["start"], attrs["end"] = min(start, end), max(start, end)
        return attrs


class RemoveDaySerializer(serializers.Serializer):
    day = serializers.CharField()


class CopyYearSerializer(serializers.Serializer):
    from_year = serializers.IntegerField()
    to_year = serializers.IntegerField()
    overwrite = serializers.BooleanField(default=False)


class RatesRequestSerializer(serializers.Serializer):
    """Per-season overrides keyed by season id.

    Override values are passed through untouched; the lookup skips the
    ones that are not usable.
    """

    date = serializers.CharField()
    prices = serializers.DictField(default=dict)
    default_price = serializers.FloatField(min_value=0)
    min_stays = serializers.DictField(default=dict)
    default_min_stay = serializers.IntegerField(min_value=1, default=1)
