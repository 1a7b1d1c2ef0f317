from __future__ import annotations

import os
import sys
from pathlib import Path

# --- make project root importable even if CWD is different ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Now we can import our app packages
from esantiye.core.config import settings  # noqa: E402
from esantiye.core.db import Database  # noqa: E402
from esantiye.core.log import configure_logging  # noqa: E402
from esantiye.core.security import hash_password  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@esantiye.local"
ADMIN_PASSWORD = os.environ.get("SEED_ADMIN_PASSWORD", "SeedPass123!")


def ensure_row(db: Database, table: str, name: str) -> bool:
    # table comes from the literals below, never from input
    existing = db.query_one(f"SELECT id FROM {table} WHERE name = :name", {"name": name})
    if existing is not None:
        print(f"[seed] {table} already exists: {name}")
        return False
    db.execute(f"INSERT INTO {table} (name) VALUES (:name)", {"name": name})
    print(f"[seed] created {table}: {name}")
    return True


def run() -> None:
    configure_logging(settings.log_level)
    print(f"[seed] database={settings.sqlalchemy_url}")

    db = Database(settings.sqlalchemy_url, sqlite_foreign_keys=settings.sqlite_foreign_keys)
    db.connect()
    db.init_schema()

    created = 0
    user = db.query_one(
        "SELECT id FROM users WHERE username = :username",
        {"username": ADMIN_USERNAME},
    )
    if user is None:
        db.execute(
            "INSERT INTO users (username, email, password, role) "
            "VALUES (:username, :email, :password, :role)",
            {
                "username": ADMIN_USERNAME,
                "email": ADMIN_EMAIL,
                "password": hash_password(ADMIN_PASSWORD),
                "role": "admin",
            },
        )
        created += 1
        print(f"[seed] created user: {ADMIN_USERNAME}")
    else:
        print(f"[seed] user already exists: {ADMIN_USERNAME}")

    created += ensure_row(db, "projects", "Merkez Şantiye")
    created += ensure_row(db, "materials", "Çimento")
    created += ensure_row(db, "personnel", "Şantiye Şefi")

    db.close()
    print(f"[seed] done. rows_created={created}")


if __name__ == "__main__":
    run()
