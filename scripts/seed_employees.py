#!/usr/bin/env python3
"""
Seed the employee table with an admin account and a few demo staff.
Every seeded account starts with the configured default password.
"""

import sys
from pathlib import Path

from sqlalchemy.exc import IntegrityError

# Add src/ to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from staff_admin.config.settings import get_settings
from staff_admin.repositories.sqlalchemy import (
    SqlAlchemyEmployeeRepository,
    get_session,
    init_db,
)
from staff_admin.services import EmployeeAccountService, EmployeeCreate


DEMO_EMPLOYEES = [
    EmployeeCreate(username="admin", name="Administrator", phone="13800000000", sex="1", id_number="110101199001010011"),
    EmployeeCreate(username="zhangsan", name="Zhang San", phone="13800000001", sex="1", id_number="110101199202020022"),
    EmployeeCreate(username="lisi", name="Li Si", phone="13800000002", sex="0", id_number="110101199303030033"),
]


def seed_employees() -> None:
    """Create the demo accounts, skipping usernames that already exist."""
    settings = get_settings()
    init_db()
    session = get_session()
    try:
        service = EmployeeAccountService(
            employee_repo=SqlAlchemyEmployeeRepository(session),
            default_password=settings.default_password,
            timezone=settings.timezone,
        )
        for data in DEMO_EMPLOYEES:
            try:
                created = service.create_account(data)
                print(f"✓ Created '{created.username}' (id={created.id})")
            except IntegrityError:
                print(f"✓ '{data.username}' already exists")
    finally:
        session.close()

    print(f"\nDatabase: {settings.database_url}")
    print(f"Default password: {settings.default_password}")


if __name__ == "__main__":
    try:
        seed_employees()
    except Exception as e:
        print(f"\n✗ Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
