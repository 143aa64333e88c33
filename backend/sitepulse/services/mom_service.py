import logging

from sqlalchemy.orm import Session

from sitepulse.models.mom import MinutesOfMeeting
from sitepulse.schemas.mom import MomCreate
from sitepulse.schemas.user import TokenUser
from sitepulse.services.activity_service import list_activities

logger = logging.getLogger(__name__)

PREFILL_FEED_LIMIT = 10
PREFILL_ENTRIES = 3


def _when(activity: dict) -> str:
    value = activity.get("reportDate") or activity.get("createdAt")
    return value.isoformat() if hasattr(value, "isoformat") else str(value or "")


def observation_line(index: int, activity: dict) -> str:
    line = (
        f"{index}. [{_when(activity)}] Project: {activity.get('projectNo') or '-'}"
        f" | By: {activity.get('username') or '-'}"
        f" | Activity: {activity.get('dailyTargetAchieved') or '-'}"
    )
    if activity.get("problemFaced"):
        line += f" | Problem: {activity['problemFaced']}"
    return line


def solution_line(index: int, activity: dict) -> str:
    if activity.get("dailyTargetAchieved"):
        action = f"Work: {activity['dailyTargetAchieved']}"
    elif activity.get("problemFaced"):
        action = f"Action: {activity['problemFaced']}"
    else:
        action = "No details"
    return f"{index}. [{_when(activity)}] {action} ({activity.get('projectNo') or 'proj'})"


def mom_prefill(db: Session, caller: TokenUser) -> dict:
    feed = list_activities(db, caller, page=1, limit=PREFILL_FEED_LIMIT)["activities"]
    hourly = [activity for activity in feed if activity["reportType"] == "hourly"][:PREFILL_ENTRIES]

    return {
        "observation": "\n".join(observation_line(i, a) for i, a in enumerate(hourly, start=1)),
        "solution": "\n".join(solution_line(i, a) for i, a in enumerate(hourly, start=1)),
    }


def create_mom(db: Session, caller: TokenUser, payload: MomCreate) -> MinutesOfMeeting:
    mom = MinutesOfMeeting(
        user_id=caller.id,
        customer_name=payload.customerName,
        customer_person=payload.customerPerson,
        customer_contact=payload.custContact,
        mom_date=payload.momDate,
        reporting_time=payload.reportingTime,
        close_time=payload.momCloseTime,
        man_hours=payload.manHours,
        engineer_name=payload.enggName,
        site_location=payload.siteLocation,
        project_name=payload.projectName,
        observation=payload.observation,
        solution=payload.solution,
        conclusion=payload.conclusion,
        latitude=payload.latitude,
        longitude=payload.longitude,
    )
    db.add(mom)
    db.commit()
    db.refresh(mom)

    logger.info("MOM %s saved by user %s", mom.id, caller.id)
    return mom


def list_moms(db: Session, caller: TokenUser) -> list[MinutesOfMeeting]:
    return db.query(MinutesOfMeeting).filter(
        MinutesOfMeeting.user_id == caller.id
    ).order_by(MinutesOfMeeting.created_at.desc()).all()
