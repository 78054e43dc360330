"""Pydantic schemas for employee endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from staff_admin.domain.models.enums import AccountStatus


class EmployeeLoginRequest(BaseModel):
    """Request schema for employee login."""

    username: str = Field(..., min_length=1, max_length=32)
    password: str = Field(..., description="Raw password")


class EmployeeLoginResponse(BaseModel):
    """Response schema for a successful login. Never includes the password."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    name: str


class EmployeeCreateRequest(BaseModel):
    """Request schema for creating an employee account.

    Status and password are assigned by the server; extra keys are ignored.
    """

    username: str = Field(..., min_length=1, max_length=32, description="Unique login name")
    name: str = Field(..., min_length=1, max_length=32)
    phone: Optional[str] = Field(default=None, max_length=11)
    sex: Optional[str] = Field(default=None, max_length=2)
    id_number: Optional[str] = Field(default=None, max_length=18, description="National-ID number")
    avatar: Optional[str] = Field(default=None, max_length=255)


class EmployeeUpdateRequest(BaseModel):
    """Request schema for editing an employee profile (partial update)."""

    id: int
    username: Optional[str] = Field(default=None, min_length=1, max_length=32)
    name: Optional[str] = Field(default=None, min_length=1, max_length=32)
    phone: Optional[str] = Field(default=None, max_length=11)
    sex: Optional[str] = Field(default=None, max_length=2)
    id_number: Optional[str] = Field(default=None, max_length=18)
    avatar: Optional[str] = Field(default=None, max_length=255)


class PasswordChangeRequest(BaseModel):
    """Request schema for changing the caller's own password."""

    old_password: str
    new_password: str


class EmployeeResponse(BaseModel):
    """Response schema for a single employee (password masked)."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    name: str
    password: str
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    avatar: Optional[str] = None
    status: AccountStatus
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    create_user: Optional[int] = None
    update_user: Optional[int] = None


class EmployeeSummary(BaseModel):
    """Row in a paged employee listing."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    name: str
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    status: AccountStatus
    update_time: Optional[datetime] = None


class EmployeePageResponse(BaseModel):
    """Response schema for a page of employees."""

    total: int
    records: list[EmployeeSummary]
