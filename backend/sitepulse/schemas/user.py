from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import Optional

from sitepulse.core.roles import Role


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    mobile: Optional[str] = None
    dob: Optional[str] = None
    joining_date: Optional[str] = Field(default=None, alias="joiningDate")
    role: Optional[str] = None
    manager_id: Optional[int] = Field(default=None, alias="managerId")
    employee_id: Optional[str] = Field(default=None, alias="employeeId")


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    token: str
    username: str
    role: str
    employeeId: Optional[str] = None
    id: int


class TokenUser(BaseModel):
    """Identity decoded from a bearer token."""

    id: int
    username: str
    role: str

    @property
    def access_role(self) -> Role:
        return Role.from_text(self.role)


class EmployeeOut(BaseModel):
    id: int
    username: str
    role: str
    employee_id: Optional[str] = None
    joining_date: Optional[date] = None

    model_config = {
        "from_attributes": True
    }


class SubordinateOut(BaseModel):
    id: int
    username: str
    role: str
    managerId: Optional[int] = Field(default=None, validation_alias="manager_id")
    dob: Optional[date] = None

    model_config = {
        "from_attributes": True
    }
