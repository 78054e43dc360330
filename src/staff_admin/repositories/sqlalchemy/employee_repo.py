"""SQLAlchemy implementation of EmployeeRepository."""

from typing import Optional

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from staff_admin.domain.models import AccountStatus, Employee, EmployeePatch
from staff_admin.repositories.sqlalchemy.orm_models import EmployeeORM


class SqlAlchemyEmployeeRepository:
    """SQLAlchemy-backed employee repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, employee: Employee) -> Employee:
        """Persist a new employee."""
        orm_employee = self._to_orm(employee)
        self._db.add(orm_employee)
        try:
            self._db.commit()
        except IntegrityError:
            self._db.rollback()
            raise
        self._db.refresh(orm_employee)
        return self._to_domain(orm_employee)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Retrieve employee by ID."""
        orm_employee = self._db.query(EmployeeORM).filter(
            EmployeeORM.id == employee_id
        ).first()
        return self._to_domain(orm_employee) if orm_employee else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        """Retrieve employee by username."""
        orm_employee = self._db.query(EmployeeORM).filter(
            EmployeeORM.username == username
        ).first()
        return self._to_domain(orm_employee) if orm_employee else None

    def get_by_id_number(self, id_number: str) -> Optional[Employee]:
        """Retrieve employee by national-ID number."""
        orm_employee = self._db.query(EmployeeORM).filter(
            EmployeeORM.id_number == id_number
        ).first()
        return self._to_domain(orm_employee) if orm_employee else None

    def update(self, employee_id: int, patch: EmployeePatch) -> bool:
        """Apply the provided patch fields to an existing employee."""
        orm_employee = self._db.query(EmployeeORM).filter(
            EmployeeORM.id == employee_id
        ).first()
        if not orm_employee:
            return False

        for column, value in patch.changes().items():
            if isinstance(value, AccountStatus):
                value = value.value
            setattr(orm_employee, column, value)

        try:
            self._db.commit()
        except IntegrityError:
            self._db.rollback()
            raise
        return True

    def page_query(
        self,
        page: int,
        page_size: int,
        name: Optional[str] = None,
        status: Optional[AccountStatus] = None,
    ) -> tuple[list[Employee], int]:
        """Return one page of employees, newest first, plus the total count."""
        query = self._db.query(EmployeeORM)

        conditions = []
        if name:
            conditions.append(EmployeeORM.name.like(f"%{name}%"))
        if status is not None:
            conditions.append(EmployeeORM.status == int(status))

        if conditions:
            query = query.filter(and_(*conditions))

        total = query.count()

        offset = max(page - 1, 0) * page_size
        orm_employees = (
            query.order_by(EmployeeORM.create_time.desc(), EmployeeORM.id.desc())
            .offset(offset)
            .limit(page_size)
            .all()
        )
        return [self._to_domain(e) for e in orm_employees], total

    @staticmethod
    def _to_orm(employee: Employee) -> EmployeeORM:
        """Convert domain model to ORM model."""
        return EmployeeORM(
            id=employee.id,
            username=employee.username,
            name=employee.name,
            password=employee.password,
            phone=employee.phone,
            sex=employee.sex,
            id_number=employee.id_number,
            avatar=employee.avatar,
            status=int(employee.status),
            create_time=employee.create_time,
            update_time=employee.update_time,
            create_user=employee.create_user,
            update_user=employee.update_user,
        )

    @staticmethod
    def _to_domain(orm: EmployeeORM) -> Employee:
        """Convert ORM model to domain model."""
        return Employee(
            id=orm.id,
            username=orm.username,
            name=orm.name,
            password=orm.password,
            phone=orm.phone,
            sex=orm.sex,
            id_number=orm.id_number,
            avatar=orm.avatar,
            status=AccountStatus(orm.status),
            create_time=orm.create_time,
            update_time=orm.update_time,
            create_user=orm.create_user,
            update_user=orm.update_user,
        )
