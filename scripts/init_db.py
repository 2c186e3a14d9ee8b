from __future__ import annotations

from employee_attendance.database.bootstrap import create_schema, list_tables
from employee_attendance.extensions import db
from employee_attendance.main import create_app


def main() -> None:
    app = create_app(AUTO_INIT_DB=False, AUTO_SEED_DB=False)
    with app.app_context():
        create_schema(db)
        tables = list_tables(db)
        url = db.engine.url.render_as_string(hide_password=True)
    print(f"OK: Created schema -> {url} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
