"""
Run hand-written SQL migration files against the CVKing database.

The MySQL driver executes one statement per call, so a file is split on
top-level semicolons first. Semicolons inside quotes or comments do not
end a statement.
"""
import logging
from pathlib import Path
from typing import List, Union

from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

QUOTES = ("'", '"', "`")


def split_sql_statements(sql: str) -> List[str]:
    """Split SQL text into statements, dropping comments and empty statements."""
    statements = []
    current = []
    i = 0
    length = len(sql)

    while i < length:
        char = sql[i]
        nxt = sql[i + 1] if i + 1 < length else ""

        if char in QUOTES:
            end = i + 1
            while end < length:
                if sql[end] == "\\" and char != "`":
                    end += 2
                    continue
                if sql[end] == char:
                    # Doubled quote is an escaped quote
                    if end + 1 < length and sql[end + 1] == char:
                        end += 2
                        continue
                    break
                end += 1
            current.append(sql[i:end + 1])
            i = end + 1
        elif (char == "-" and nxt == "-") or char == "#":
            newline = sql.find("\n", i)
            i = length if newline == -1 else newline
        elif char == "/" and nxt == "*":
            close = sql.find("*/", i + 2)
            i = length if close == -1 else close + 2
        elif char == ";":
            statements.append("".join(current))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1

    statements.append("".join(current))
    return [s.strip() for s in statements if s.strip()]


def run_sql_script(engine: Engine, sql: str) -> int:
    """
    Execute every statement in one transaction.

    Returns:
        Number of statements executed

    Raises:
        ValueError: If the script holds no statements
    """
    statements = split_sql_statements(sql)
    if not statements:
        raise ValueError("SQL script contains no statements")

    with engine.begin() as conn:
        for number, statement in enumerate(statements, start=1):
            logger.debug(f"Executing statement {number}/{len(statements)}: {statement[:80]}")
            # no_parameters keeps the driver from treating "%" as a placeholder
            conn.exec_driver_sql(statement, execution_options={"no_parameters": True})

    logger.info(f"SQL migration executed: {len(statements)} statement(s)")
    return len(statements)


def run_sql_file(engine: Engine, path: Union[str, Path]) -> int:
    sql = Path(path).read_text(encoding="utf-8")
    logger.info(f"Running SQL migration from {path}")
    return run_sql_script(engine, sql)
