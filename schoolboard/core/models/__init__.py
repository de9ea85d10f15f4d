from schoolboard.core.models.student import Student
from schoolboard.core.models.attendance import Attendance
from schoolboard.core.models.behavior_report import BehaviorReport
from schoolboard.core.models.notification import Notification
from schoolboard.core.models.survey import Survey

__all__ = [
    "Attendance",
    "BehaviorReport",
    "Notification",
    "Student",
    "Survey",
]
