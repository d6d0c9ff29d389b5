# logbook/admin.py
from django.contrib import admin
from .models import LogbookEntry


@admin.register(LogbookEntry)
class LogbookEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "course", "delegate", "day_of_week", "time_slot", "status",
                    "review_status", "reviewed_by", "created_at")
    list_filter = ("review_status", "status", "day_of_week", "course")
    search_fields = ("course__code", "course__title", "delegate__email", "remarks")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at", "review_timestamp")
    filter_horizontal = ("covered_subtopics",)
