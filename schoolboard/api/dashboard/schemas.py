import datetime as dt

from schoolboard.core.schemas import CamelModel


class DashboardStats(CamelModel):
    total_students: int
    attendance_today: int
    pending_reports: int
    notifications_sent: int
    positive_reports: int
    negative_reports: int
    active_surveys: int
    survey_responses: int


class WeeklyAttendanceDay(CamelModel):
    date: dt.date
    present: int
    absent: int
    late: int
    rate: int


class GradeBehavior(CamelModel):
    grade: str
    positive: int
    negative: int
