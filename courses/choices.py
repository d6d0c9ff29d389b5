COURSE_STATUS_CHOICES = [
    ("Active", "Active"),
    ("Inactive", "Inactive"),
]

COURSE_LEVEL_CHOICES = [(level, str(level)) for level in (200, 300, 400, 500, 600)]

SEMESTER_CHOICES = [
    ("1st", "1st"),
    ("2nd", "2nd"),
]

# Recurring schedule days. Timetabled occurrences may also fall on a Sunday.
SCHEDULE_DAY_CHOICES = [
    ("MON", "Monday"),
    ("TUE", "Tuesday"),
    ("WED", "Wednesday"),
    ("THU", "Thursday"),
    ("FRI", "Friday"),
    ("SAT", "Saturday"),
]

TIMETABLE_DAY_CHOICES = SCHEDULE_DAY_CHOICES + [("SUN", "Sunday")]

TIME_SLOT_CHOICES = [
    ("07:00-09:00", "07:00-09:00"),
    ("09:00-11:00", "09:00-11:00"),
    ("11:00-13:00", "11:00-13:00"),
    ("13:00-15:00", "13:00-15:00"),
    ("15:00-17:00", "15:00-17:00"),
    ("17:00-19:00", "17:00-19:00"),
]

DAY_NAME_TO_ABBREVIATION = {name: abbr for abbr, name in TIMETABLE_DAY_CHOICES}
DAY_ABBREVIATION_TO_NAME = {abbr: name for abbr, name in TIMETABLE_DAY_CHOICES}

# Indexed by ``datetime.weekday()``.
WEEKDAY_ABBREVIATIONS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]
