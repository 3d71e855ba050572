"""Text templates for the generated data-access module.

Placeholders use ``string.Template`` syntax so the generated code can keep
its own braces (f-strings, dict literals) untouched.
"""

from string import Template


MODULE_DOCSTRING = Template('''\
"""
Data-access module generated by GYSQL.

Database: $database_name
Tables: $table_list

Requires psycopg2 (pip install psycopg2-binary). Run this file directly to
execute the non-destructive integration checks.
"""''')


IMPORTS = '''\
from contextlib import contextmanager
from datetime import datetime

import psycopg2
from psycopg2.extras import RealDictCursor
from psycopg2.pool import SimpleConnectionPool'''


CONNECTION_BLOCK = Template('''\
DB_CONFIG = {
    "host": $host,
    "port": $port,
    "dbname": $database_name,
    "user": $user,
    "password": $password,
}

POOL_MIN_CONNECTIONS = $pool_min
POOL_MAX_CONNECTIONS = $pool_max

_pool = None''')


CONNECTION_HELPERS = '''\
@contextmanager
def get_connection():
    """Open a row-cursor connection (rows as dicts); always closed on exit."""
    conn = psycopg2.connect(cursor_factory=RealDictCursor, **DB_CONFIG)
    try:
        yield conn
    finally:
        conn.close()


def get_pool():
    """Shared connection pool, created on first call and reused afterwards."""
    global _pool
    if _pool is None:
        _pool = SimpleConnectionPool(
            POOL_MIN_CONNECTIONS,
            POOL_MAX_CONNECTIONS,
            cursor_factory=RealDictCursor,
            **DB_CONFIG,
        )
    return _pool


def close_pool():
    """Close every pooled connection; safe to call more than once."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None


def run_query(sql, params=None):
    """Run one statement on a pooled connection and return all rows."""
    pool = get_pool()
    conn = pool.getconn()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            rows = cur.fetchall() if cur.description is not None else []
        conn.commit()
        return rows
    except psycopg2.Error:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)'''


SECTION_HEADER = Template('''\
# ---------------------------------------------------------------------------
# Table: $table
# Columns: $column_list
# Key column: $key_column
# ---------------------------------------------------------------------------''')


LIST_ALL = Template('''\
def $function():
    """Return every row of $table (an empty list when the table is empty)."""
    return run_query($sql)''')


GET_BY_ID = Template('''\
def $function($key_param):
    """Return the $table row whose $key_column matches, or None."""
    rows = run_query($sql, ($key_param,))
    return rows[0] if rows else None''')


INSERT = Template('''\
def $function($params):
    """Insert one row into $table and return it, or None on failure."""
    sql = $sql
    try:
        with get_connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute($execute_args)
                    row = cur.fetchone()
                conn.commit()
            except psycopg2.Error:
                conn.rollback()
                raise
    except psycopg2.Error as error:
        print(f"$function failed: {error}")
        return None
    return row''')


UPDATE = Template('''\
def $function($params):
    """Update the $table row whose $key_column matches and return it, or None."""
    sql = $sql
    try:
        with get_connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, $values)
                    row = cur.fetchone()
                conn.commit()
            except psycopg2.Error:
                conn.rollback()
                raise
    except psycopg2.Error as error:
        print(f"$function failed: {error}")
        return None
    if row is None:
        print(f"$function: no row in $table with $key_column = {$key_param!r} (not found)")
        return None
    return row''')


UPDATE_WITHOUT_COLUMNS = Template('''\
def $function($key_param):
    """$table has no updatable columns; returns the current row, or None."""
    return $get_by_id($key_param)''')


DELETE = Template('''\
def $function($key_param):
    """Delete the $table row whose $key_column matches; True if a row was deleted."""
    sql = $sql
    try:
        with get_connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, ($key_param,))
                    deleted = cur.rowcount
                conn.commit()
            except psycopg2.Error:
                conn.rollback()
                raise
    except psycopg2.Error as error:
        print(f"$function failed: {error}")
        return False
    return deleted > 0''')


TEST_DRIVER_HEADER = '''\
# ---------------------------------------------------------------------------
# Integration checks (non-destructive: test rows are never deleted)
# ---------------------------------------------------------------------------


def _log(message):
    print(f"[{datetime.now():%H:%M:%S}] {message}")'''


TABLE_CHECK = Template('''\
def $function():
    """Round-trip one synthesized row through the $table functions."""
    _log("$table: checking connectivity")
    run_query("SELECT 1;")
    _log(f"$table: {len($list_all())} existing row(s)")

    created = $insert($insert_values)
    if created is None:
        _log("$table: insert failed, skipping remaining steps")
        return False
    _log(f"$table: inserted {created}")

    key = created.get($row_key)
    _log(f"$table: fetched {$get_by_id(key)}")

    updated = $update($update_args)
    _log(f"$table: updated {updated}")
    _log(f"$table: re-fetched {$get_by_id(key)}")
    _log(f"$table: {len($list_all())} row(s) after the check")

    # Cleanup is left to you. Uncomment to remove the test row:
    # $delete(key)
    return True''')


RUN_ALL = Template('''\
def run_integration_tests():
    """Run every table check in order and report how many passed."""
    checks = (
$check_entries
    )
    results = {}
    try:
        for table, check in checks:
            try:
                results[table] = check()
            except psycopg2.Error as error:
                _log(f"{table}: {error}")
                results[table] = False
    finally:
        close_pool()
    passed = sum(1 for ok in results.values() if ok)
    _log(f"{passed}/{len(results)} table check(s) passed")
    return results


if __name__ == "__main__":
    run_integration_tests()''')


FOOTER_HEADER = '''\
# ---------------------------------------------------------------------------
# Summary'''

FOOTER_RULE = "# ---------------------------------------------------------------------------"
