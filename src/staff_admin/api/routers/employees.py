"""Employee account endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from staff_admin.api.deps import (
    get_employee_service,
    get_current_actor_id,
    get_optional_actor_id,
)
from staff_admin.api.schemas.employee import (
    EmployeeLoginRequest,
    EmployeeLoginResponse,
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
    PasswordChangeRequest,
    EmployeeResponse,
    EmployeeSummary,
    EmployeePageResponse,
)
from staff_admin.config.settings import get_settings
from staff_admin.domain.models import AccountStatus
from staff_admin.services import (
    EmployeeAccountService,
    EmployeeCreate,
    EmployeeUpdate,
    PasswordChange,
)

router = APIRouter(prefix="/admin/employee", tags=["employee"])


@router.post("/login", response_model=EmployeeLoginResponse)
def login(
    data: EmployeeLoginRequest,
    svc: EmployeeAccountService = Depends(get_employee_service),
):
    """Check credentials and return the employee summary."""
    employee = svc.login(data.username, data.password)
    return EmployeeLoginResponse.model_validate(employee)


@router.post("", response_model=EmployeeResponse, status_code=201)
def create_employee(
    data: EmployeeCreateRequest,
    svc: EmployeeAccountService = Depends(get_employee_service),
    actor_id: Optional[int] = Depends(get_optional_actor_id),
):
    """Create a new employee with the default password."""
    created = svc.create_account(
        EmployeeCreate(
            username=data.username,
            name=data.name,
            phone=data.phone,
            sex=data.sex,
            id_number=data.id_number,
            avatar=data.avatar,
        ),
        actor_id=actor_id,
    )
    return EmployeeResponse.model_validate(svc.get_by_id(created.id))


@router.get("/page", response_model=EmployeePageResponse)
def page_query(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    name: Optional[str] = Query(None, max_length=32),
    status: Optional[int] = Query(None, ge=0, le=1),
    svc: EmployeeAccountService = Depends(get_employee_service),
):
    """List employees, newest first, optionally filtered by name and status."""
    result = svc.page_query(
        page=page,
        page_size=page_size or get_settings().default_page_size,
        name=name,
        status=AccountStatus(status) if status is not None else None,
    )
    return EmployeePageResponse(
        total=result.total,
        records=[EmployeeSummary.model_validate(e) for e in result.records],
    )


@router.post("/status/{status}", status_code=204)
def set_status(
    status: int,
    id: int = Query(...),
    svc: EmployeeAccountService = Depends(get_employee_service),
    actor_id: Optional[int] = Depends(get_optional_actor_id),
):
    """Enable (1) or disable (0) an employee account."""
    svc.set_status(status, id, actor_id=actor_id)


@router.get("/id-number/{id_number}", response_model=EmployeeResponse)
def get_employee_by_id_number(
    id_number: str,
    svc: EmployeeAccountService = Depends(get_employee_service),
):
    """Look up an employee by national-ID number."""
    return EmployeeResponse.model_validate(svc.get_by_id_number(id_number))


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    svc: EmployeeAccountService = Depends(get_employee_service),
):
    """Look up an employee by ID."""
    return EmployeeResponse.model_validate(svc.get_by_id(employee_id))


@router.put("", status_code=204)
def update_employee(
    data: EmployeeUpdateRequest,
    svc: EmployeeAccountService = Depends(get_employee_service),
    actor_id: Optional[int] = Depends(get_optional_actor_id),
):
    """Edit an employee's profile fields."""
    provided = data.model_dump(exclude_unset=True)
    cleared = frozenset(key for key, value in provided.items() if value is None)
    svc.update_profile(
        EmployeeUpdate(**provided, cleared=cleared),
        actor_id=actor_id,
    )


@router.put("/password", status_code=204)
def change_password(
    data: PasswordChangeRequest,
    svc: EmployeeAccountService = Depends(get_employee_service),
    actor_id: int = Depends(get_current_actor_id),
):
    """Change the calling employee's own password."""
    svc.change_password(
        actor_id,
        PasswordChange(old_password=data.old_password, new_password=data.new_password),
    )
