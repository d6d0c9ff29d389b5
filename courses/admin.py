# courses/admin.py
from django.contrib import admin
from .models import Chapter, Course, Department, Hall, Module, ScheduleEntry, Subtopic, TimetableEntry


# ================================
# INLINES – OUTLINE
# ================================

class ChapterInline(admin.TabularInline):
    model = Chapter
    extra = 0
    fields = ("title", "order")


class SubtopicInline(admin.TabularInline):
    model = Subtopic
    extra = 1
    fields = ("title", "order", "completed")


# ================================
# ADMIN CLASSES
# ================================

@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "created_at")
    search_fields = ("name", "code")
    readonly_fields = ("created_at",)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "title", "department", "level", "status", "created_at")
    list_filter = ("department", "level", "status")
    search_fields = ("title", "code", "description")
    ordering = ("code",)


@admin.register(Hall)
class HallAdmin(admin.ModelAdmin):
    list_display = ("name",)
    search_fields = ("name",)


@admin.register(ScheduleEntry)
class ScheduleEntryAdmin(admin.ModelAdmin):
    list_display = ("course", "semester", "day", "time_slot", "hall", "teacher")
    list_filter = ("semester", "day", "time_slot")
    search_fields = ("course__code", "course__title", "teacher__email")
    autocomplete_fields = ("course", "hall", "teacher")


@admin.register(TimetableEntry)
class TimetableEntryAdmin(admin.ModelAdmin):
    list_display = ("course", "teacher", "day", "time_slot", "start_time", "end_time", "hall")
    list_filter = ("day",)
    search_fields = ("course__code", "teacher__email")
    autocomplete_fields = ("course", "hall", "teacher")


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = ("title", "course", "order", "status")
    list_filter = ("course", "status")
    search_fields = ("title",)
    ordering = ("course", "order")
    autocomplete_fields = ("course",)
    inlines = [ChapterInline]


@admin.register(Chapter)
class ChapterAdmin(admin.ModelAdmin):
    list_display = ("title", "module", "order")
    list_filter = ("module__course",)
    search_fields = ("title",)
    ordering = ("module", "order")
    autocomplete_fields = ("module",)
    inlines = [SubtopicInline]


@admin.register(Subtopic)
class SubtopicAdmin(admin.ModelAdmin):
    list_display = ("title", "chapter", "order", "completed", "updated_at")
    list_filter = ("completed", "chapter__module__course")
    search_fields = ("title",)
    ordering = ("chapter", "order")
