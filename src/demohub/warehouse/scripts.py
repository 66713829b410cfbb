"""Splitting of multi-statement SQL scripts."""

import os
from pathlib import Path
from typing import List, Union

# dialects where a backslash escapes the next character inside '...'
BACKSLASH_ESCAPE_DIALECTS = ("mysql", "mariadb", "snowflake")


def split_sql_statements(script: str, backslash_escapes: bool = False) -> List[str]:
    """
    Split a SQL script into individual statements.

    Semicolons only terminate a statement when they appear outside of
    quoted strings, quoted identifiers, ``$$`` bodies and comments.
    Statements that contain nothing but comments are dropped.

    Args:
        script: Full script text
        backslash_escapes: Treat a backslash inside single quoted strings as
            an escape (MySQL, Snowflake). Standard SQL, PostgreSQL and
            SQLite only escape a quote by doubling it.

    Returns:
        List of statements without the trailing semicolon.
    """
    statements = []
    current = []
    has_code = False
    i = 0
    n = len(script)

    while i < n:
        ch = script[i]
        nxt = script[i + 1] if i + 1 < n else ""

        if ch == "-" and nxt == "-":
            end = script.find("\n", i)
            end = n if end == -1 else end
            current.append(script[i:end])
            i = end
            continue

        if ch == "/" and nxt == "*":
            end = script.find("*/", i + 2)
            end = n if end == -1 else end + 2
            current.append(script[i:end])
            i = end
            continue

        if ch == "$" and nxt == "$":
            end = script.find("$$", i + 2)
            end = n if end == -1 else end + 2
            current.append(script[i:end])
            has_code = True
            i = end
            continue

        if ch in ("'", '"'):
            j = i + 1
            while j < n:
                if script[j] == ch:
                    # doubled quote is an escaped quote
                    if j + 1 < n and script[j + 1] == ch:
                        j += 2
                        continue
                    break
                if backslash_escapes and ch == "'" and script[j] == "\\":
                    j += 2
                    continue
                j += 1
            current.append(script[i:j + 1])
            has_code = True
            i = j + 1
            continue

        if ch == ";":
            if has_code:
                statements.append("".join(current).strip())
            current = []
            has_code = False
            i += 1
            continue

        if not ch.isspace():
            has_code = True
        current.append(ch)
        i += 1

    if has_code:
        statements.append("".join(current).strip())

    return statements


def read_script(source: Union[str, Path]) -> str:
    """
    Return script text from a file path, or the text itself.

    Args:
        source: Path to a script file, or literal SQL text. A single line
            string naming an existing file (or ending in .sql) is read as a path.

    Returns:
        Script text.
    """
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")
    if "\n" not in source:
        candidate = source.strip()
        if os.path.isfile(candidate) or candidate.lower().endswith(".sql"):
            return Path(candidate).read_text(encoding="utf-8")
    return source
