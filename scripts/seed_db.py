from __future__ import annotations

import importlib

from dotenv import load_dotenv

from society_attendance import SQL_DIR
from society_attendance.database.bootstrap import apply_seed_sql, ensure_demo_officer
from society_attendance.database.connection import DBConfig
from society_attendance.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")
    ensure_demo_officer(db_config)

    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
