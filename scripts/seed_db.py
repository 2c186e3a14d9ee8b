from __future__ import annotations

from employee_attendance.database.bootstrap import create_schema, seed_default_employees
from employee_attendance.extensions import db
from employee_attendance.main import create_app


def main() -> None:
    app = create_app(AUTO_INIT_DB=False, AUTO_SEED_DB=False)
    with app.app_context():
        create_schema(db)
        added = seed_default_employees(db)

    if added:
        print(f"OK: Seeded {added} default employees")
    else:
        print("OK: Employees already present, nothing seeded")


if __name__ == "__main__":
    main()
