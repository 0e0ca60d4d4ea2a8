"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_SESSION_KEY = "hms_user"

ADMIN_USER_ID = "admin01"
ADMIN_EMAIL = "admin@hms.com"

ALL_STUDENTS = "all"
ALL_FEES = "All"

NOT_AVAILABLE = "N/A"
VACANT = "Vacant"

DEFAULT_PROFILE_PICTURE_URL = "https://picsum.photos/seed/new/200"

STUDENT_ROSTER_FILENAME = "hostel_students.csv"
FEE_DUE_FILENAME = "fee_due_report.csv"
ROOM_OCCUPANCY_FILENAME = "room_occupancy_report.csv"
