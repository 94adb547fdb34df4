from django.contrib import admin

from seasons.models import Season


@admin.register(Season)
class SeasonAdmin(admin.ModelAdmin):
    list_display = ["season_id", "host_id", "year", "name", "color", "updated_at"]
    list_filter = ["year"]
    search_fields = ["host_id", "season_id", "name"]
    readonly_fields = ["season_id", "created_at", "updated_at"]
