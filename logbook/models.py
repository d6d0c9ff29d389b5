# models.py
"""
Logbook entries: a delegate's report on one scheduled session of a course,
and the teacher's review of that report.
"""

from django.conf import settings
from django.db import models


class LogbookEntry(models.Model):

    class SessionStatus(models.TextChoices):
        LECTURE_HELD = "Lecture Held", "Lecture Held"
        CANCELLED = "Cancelled", "Cancelled"
        POSTPONED = "Postponed", "Postponed"
        OTHER = "Other", "Other"

    class ReviewStatus(models.TextChoices):
        PENDING = "Pending", "Pending"
        APPROVED = "Approved", "Approved"
        NEEDS_CORRECTION = "Needs Correction", "Needs Correction"

    class DayOfWeek(models.TextChoices):
        MONDAY = "Monday", "Monday"
        TUESDAY = "Tuesday", "Tuesday"
        WEDNESDAY = "Wednesday", "Wednesday"
        THURSDAY = "Thursday", "Thursday"
        FRIDAY = "Friday", "Friday"
        SATURDAY = "Saturday", "Saturday"
        SUNDAY = "Sunday", "Sunday"

    course = models.ForeignKey("courses.Course", on_delete=models.CASCADE, related_name="logbook_entries")
    delegate = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="logbook_entries"
    )
    # Only set by timetabled submissions.
    timetable_entry = models.ForeignKey(
        "courses.TimetableEntry",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="logbook_entries",
    )
    day_of_week = models.CharField(max_length=9, choices=DayOfWeek.choices)
    time_slot = models.CharField(max_length=11)
    status = models.CharField(max_length=20, choices=SessionStatus.choices)
    remarks = models.TextField(blank=True, default="")
    covered_subtopics = models.ManyToManyField(
        "courses.Subtopic", blank=True, related_name="logbook_entries"
    )

    # Review
    review_status = models.CharField(
        max_length=20, choices=ReviewStatus.choices, default=ReviewStatus.PENDING
    )
    review_remarks = models.TextField(blank=True, default="")
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_logbook_entries",
    )
    review_timestamp = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "Logbook entries"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(
                fields=["delegate", "course", "day_of_week", "time_slot"], name="logbook_delegate_slot_idx"
            ),
            models.Index(fields=["course", "review_status"], name="logbook_course_review_idx"),
        ]
        constraints = [
            # Slot-based entries only; timetabled ones are keyed by their session.
            models.UniqueConstraint(
                fields=["delegate", "course", "day_of_week", "time_slot"],
                condition=models.Q(timetable_entry__isnull=True),
                name="logbook_unique_slot_entry",
            ),
        ]

    def __str__(self):
        return f"{self.course.code} {self.day_of_week} {self.time_slot} ({self.review_status})"
