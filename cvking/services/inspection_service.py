"""
Schema and data inspection for the CVKing database.

Replaces the MySQL-only `DESCRIBE` / `SELECT COUNT(*)` checks with
SQLAlchemy's inspector so the same report works on any backend.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection, Engine

from cvking.db.models import KNOWN_TABLES

logger = logging.getLogger(__name__)

TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
DEFAULT_SAMPLE_LIMIT = 3


@dataclass
class ColumnInfo:
    name: str
    type: str
    nullable: bool = True
    default: Optional[str] = None


@dataclass
class TableReport:
    name: str
    record_count: int = 0
    columns: List[str] = field(default_factory=list)
    sample_rows: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return self.error is None and self.record_count > 0


@dataclass
class DatabaseReport:
    tables: List[TableReport] = field(default_factory=list)

    @property
    def total_tables(self) -> int:
        return len(self.tables)

    @property
    def tables_with_data(self) -> List[TableReport]:
        return [t for t in self.tables if t.has_data]

    @property
    def tables_without_data(self) -> List[TableReport]:
        return [t for t in self.tables if t.error is None and t.record_count == 0]

    @property
    def failed_tables(self) -> List[TableReport]:
        return [t for t in self.tables if t.error is not None]

    @property
    def total_records(self) -> int:
        return sum(t.record_count for t in self.tables if t.error is None)

    def recommendations(self) -> List[str]:
        tips = []
        empty = len(self.tables_without_data)
        filled = len(self.tables_with_data)
        if empty:
            tips.append(f"{empty} tables are empty. Consider seeding them with sample data.")
        if filled:
            tips.append(f"{filled} tables have data and are ready for use.")
        return tips


def validate_table_name(table: str) -> str:
    """
    Ensure a table name is a plain identifier.

    Row counts and samples interpolate the name into SQL, so anything
    that is not a bare identifier is refused.
    """
    if not table or not TABLE_NAME_PATTERN.match(table):
        raise ValueError(f"Invalid table name: {table!r}")
    return table


def describe_table(engine: Engine, table: str) -> List[ColumnInfo]:
    """
    List a table's columns in declaration order.

    Raises:
        LookupError: If the table does not exist
    """
    validate_table_name(table)
    inspector = inspect(engine)
    if not inspector.has_table(table):
        raise LookupError(f"Table '{table}' does not exist")

    columns = []
    for col in inspector.get_columns(table):
        default = col.get("default")
        columns.append(ColumnInfo(
            name=col["name"],
            type=str(col["type"]),
            nullable=bool(col.get("nullable", True)),
            default=str(default) if default is not None else None,
        ))
    return columns


def format_columns(columns: Sequence[ColumnInfo], verbose: bool = False) -> List[str]:
    """Render columns as numbered `name: TYPE` lines."""
    lines = []
    for i, col in enumerate(columns, start=1):
        line = f"{i}. {col.name}: {col.type}"
        if verbose:
            if col.nullable:
                line += " (nullable)"
            if col.default:
                line += f" default: {col.default}"
        lines.append(line)
    return lines


def count_rows(conn: Connection, table: str) -> int:
    validate_table_name(table)
    return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()


def sample_rows(conn: Connection, table: str, limit: int = DEFAULT_SAMPLE_LIMIT) -> List[Dict[str, Any]]:
    validate_table_name(table)
    result = conn.execute(text(f"SELECT * FROM {table} LIMIT :limit"), {"limit": limit})
    return [dict(row) for row in result.mappings()]


def inspect_table(engine: Engine, conn: Connection, table: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> TableReport:
    """Build the report for one table; failures are recorded, not raised."""
    report = TableReport(name=table)
    try:
        report.record_count = count_rows(conn, table)
        if report.record_count > 0 and sample_limit > 0:
            report.sample_rows = sample_rows(conn, table, min(report.record_count, sample_limit))
        report.columns = [col.name for col in describe_table(engine, table)]
    except Exception as e:
        # A failed statement can leave the transaction unusable for the next table
        conn.rollback()
        logger.warning(f"Error checking table {table}: {e}")
        report.error = str(e)
    return report


def check_tables(
    engine: Engine,
    tables: Optional[Sequence[str]] = None,
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
) -> DatabaseReport:
    """
    Count rows, sample data and list columns for each table.

    A failing table (missing, bad name, permission error) is recorded in
    its TableReport and the check moves on to the next one.
    """
    tables = list(tables) if tables is not None else list(KNOWN_TABLES)
    report = DatabaseReport()

    with engine.connect() as conn:
        for table in tables:
            table_report = inspect_table(engine, conn, table, sample_limit)
            report.tables.append(table_report)
            logger.debug(f"Checked table {table}: records={table_report.record_count}, error={table_report.error}")

    logger.info(
        f"Database check complete: tables={report.total_tables}, "
        f"with_data={len(report.tables_with_data)}, records={report.total_records}"
    )
    return report
