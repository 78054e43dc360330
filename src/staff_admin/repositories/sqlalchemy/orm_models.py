"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
)

from staff_admin.repositories.sqlalchemy.database import Base


class EmployeeORM(Base):
    """SQLAlchemy model for Employee."""

    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(32), unique=True, nullable=False)
    name = Column(String(32), nullable=False)
    password = Column(String(64), nullable=False)
    phone = Column(String(11), nullable=True)
    sex = Column(String(2), nullable=True)
    id_number = Column(String(18), nullable=True, index=True)
    avatar = Column(String(255), nullable=True)
    status = Column(Integer, nullable=False, default=1)
    create_time = Column(DateTime, nullable=True)
    update_time = Column(DateTime, nullable=True)
    create_user = Column(Integer, nullable=True)
    update_user = Column(Integer, nullable=True)
