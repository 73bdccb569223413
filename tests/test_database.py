from punchclock.database.bootstrap import SCHEMA_PATH, split_statements


def test_split_ignores_comments_and_quoted_semicolons():
    sql = """
-- users
CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b');
CREATE TABLE b (y INT)
"""
    assert split_statements(sql) == ["CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b')", "CREATE TABLE b (y INT)"]


def test_bundled_schema_creates_every_table():
    statements = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    names = [s.split("(")[0].split()[-1].strip("`") for s in statements]
    assert names == ["users", "role_assignments", "employee_details", "attendance_records", "payslips"]


def test_db_datetimes_are_naive_utc():
    from datetime import datetime, timezone

    from punchclock.core.constants import BUSINESS_TZ
    from punchclock.database.mysql_base import from_db_datetime, to_db_datetime

    stored = to_db_datetime(datetime(2026, 3, 2, 9, 30, tzinfo=BUSINESS_TZ))

    assert stored == datetime(2026, 3, 2, 1, 30)
    assert from_db_datetime(stored) == datetime(2026, 3, 2, 1, 30, tzinfo=timezone.utc)
    assert from_db_datetime(None) is None
