from sitepulse.models.user import User
from sitepulse.models.report import DailyTargetReport, HourlyReport
from sitepulse.models.leave import LeaveBalance, LeaveApplication
from sitepulse.models.mom import MinutesOfMeeting

__all__ = [
    "User",
    "DailyTargetReport",
    "HourlyReport",
    "LeaveBalance",
    "LeaveApplication",
    "MinutesOfMeeting",
]
