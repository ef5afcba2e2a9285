from database import engine as default_engine, Base
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
import models  # noqa: F401  (registers tables on Base.metadata)
import logging

logger = logging.getLogger(__name__)


def _check_column_exists(inspector, table: str, column: str) -> bool:
    """Check if a column exists in a table"""
    columns = [col['name'] for col in inspector.get_columns(table)]
    return column in columns


def _add_column_if_missing(engine: Engine, inspector, table: str, column: str, column_def: str) -> bool:
    """Add a column to a table if it doesn't exist"""
    if not _check_column_exists(inspector, table, column):
        logger.info(f"Running migration: Adding '{column}' column to {table} table...")
        with engine.begin() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {column_def}"))
        logger.info(f"Migration complete: '{column}' column added to {table}")
        return True
    return False


def _backfill_nulls(engine: Engine, table: str, column: str, expression: str) -> int:
    """Fill NULLs left in a column by an earlier ADD COLUMN"""
    with engine.begin() as conn:
        result = conn.execute(text(f"UPDATE {table} SET {column} = {expression} WHERE {column} IS NULL"))
    if result.rowcount:
        logger.info(f"Backfilled {result.rowcount} row(s) in {table}.{column}")
    return result.rowcount


def run_essential_migrations(engine: Engine) -> int:
    """
    Bring an older farms table up to the current schema.

    Columns added after the first release are appended when missing; this is
    safe to run on every startup.

    Returns:
        Number of columns added
    """
    inspector = inspect(engine)
    if 'farms' not in inspector.get_table_names():
        return 0

    migrations_run = 0
    # Migration: surveyed area in hectares (added: v1.1)
    if _add_column_if_missing(engine, inspector, 'farms', 'area', "REAL"):
        migrations_run += 1
    # Migration: creation date and audit timestamps (added: v1.2)
    if _add_column_if_missing(engine, inspector, 'farms', 'creation_date', "DATE"):
        migrations_run += 1
    if _add_column_if_missing(engine, inspector, 'farms', 'updated_at', "DATETIME"):
        migrations_run += 1

    # Rows written before v1.2 have no creation date; derive it from created_at
    created_at = "created_at" if _check_column_exists(inspector, "farms", "created_at") else "NULL"
    _backfill_nulls(engine, "farms", "creation_date", f"DATE(COALESCE({created_at}, CURRENT_TIMESTAMP))")
    _backfill_nulls(engine, "farms", "updated_at", f"COALESCE({created_at}, CURRENT_TIMESTAMP)")

    if migrations_run > 0:
        logger.info(f"Database schema updated: {migrations_run} migration(s) applied")
    else:
        logger.debug("Database schema is up to date")

    return migrations_run


def init_database(engine: Engine | None = None) -> None:
    """Create all tables and apply pending column migrations"""
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)

    try:
        run_essential_migrations(engine)
    except Exception as e:
        logger.warning(f"Migration warning (non-fatal): {e}")

    logger.info("Database initialized")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
