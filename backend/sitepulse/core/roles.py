import enum


class Role(str, enum.Enum):
    MANAGER = "manager"
    GROUP_LEADER = "group leader"
    TEAM_LEADER = "team leader"
    EMPLOYEE = "employee"

    @classmethod
    def from_text(cls, value: str | None) -> "Role":
        """Classify a free-text role. Only the exact titles count as supervisors."""
        normalized = " ".join(str(value or "").lower().split())
        for role in (cls.MANAGER, cls.GROUP_LEADER, cls.TEAM_LEADER):
            if normalized == role.value:
                return role
        return cls.EMPLOYEE

    @property
    def is_supervisor(self) -> bool:
        return self is not Role.EMPLOYEE

    @property
    def can_approve_leave(self) -> bool:
        return self in (Role.MANAGER, Role.TEAM_LEADER)
