from enum import Enum


class StudentStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    graduated = "graduated"


class AttendanceStatus(str, Enum):
    present = "present"
    absent = "absent"
    late = "late"


class BehaviorType(str, Enum):
    positive = "positive"
    negative = "negative"


class NotificationStatus(str, Enum):
    draft = "draft"
    sent = "sent"
    failed = "failed"


class SurveyTarget(str, Enum):
    students = "students"
    parents = "parents"
    both = "both"
