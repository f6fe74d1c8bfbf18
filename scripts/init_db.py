from __future__ import annotations

import importlib

from dotenv import load_dotenv

from society_attendance import SQL_DIR
from society_attendance.database.bootstrap import apply_schema, list_tables
from society_attendance.database.connection import DBConfig
from society_attendance.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
    tables = list_tables(db_config)
    print(f"OK: Applied schema.sql -> {DBConfig.from_dict(db_config).describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
