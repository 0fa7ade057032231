"""Create (and by default seed) the payroll database, then verify it.

    python scripts/setup_db.py              # schema + demo data
    python scripts/setup_db.py --schema-only

Exits non-zero when any ledger table is missing after the schema is applied.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_dashboard.payroll_dashboard.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_employees,
    list_tables,
    missing_tables,
    table_row_counts,
)

DATABASE_DIR = REPO_ROOT / "database"


def main(argv: list[str]) -> int:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    missing = missing_tables(list_tables(db_config))
    if missing:
        print(f"FAILED: {target} is missing tables: {', '.join(missing)}", file=sys.stderr)
        return 1

    if "--schema-only" not in argv:
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_employees(db_config)

    print(f"OK: {target}")
    for table, count in table_row_counts(db_config).items():
        print(f"  {table:<18} {count:>6} rows")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
