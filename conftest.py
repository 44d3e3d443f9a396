# type: ignore
"""
Shared fixtures: a throwaway SQLite incident store and a TestClient bound to it.

DATABASE_URL is pointed at the temporary file before ``main`` is imported so
the application's own storage gateway opens it during lifespan startup.
"""
import os
import tempfile

import pytest
from sqlalchemy import create_engine, text

_DB_DIR = tempfile.mkdtemp(prefix="crime-api-tests-")
DB_PATH = os.path.join(_DB_DIR, "stpaul_crime.sqlite3")
ASYNC_DB_URL = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["DATABASE_URL"] = ASYNC_DB_URL

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS Codes (
        code INTEGER PRIMARY KEY,
        incident_type TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Neighborhoods (
        neighborhood_number INTEGER PRIMARY KEY,
        neighborhood_name TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Incidents (
        case_number TEXT PRIMARY KEY,
        date_time DATETIME,
        code INTEGER,
        incident TEXT,
        police_grid INTEGER,
        neighborhood_number INTEGER,
        block TEXT
    )
    """,
)

sync_engine = create_engine(f"sqlite:///{DB_PATH}")
with sync_engine.begin() as _conn:
    for ddl in SCHEMA:
        _conn.execute(text(ddl))


def incident_row(case_number, date_time, code=110, incident="Arson",
                 police_grid=87, neighborhood_number=7, block="98X UNIVERSITY AV W"):
    return {
        "case_number": case_number, "date_time": date_time, "code": code,
        "incident": incident, "police_grid": police_grid,
        "neighborhood_number": neighborhood_number, "block": block,
    }


def seed(incidents=(), codes=(), neighborhoods=()):
    """Replace the store contents with the given rows."""
    with sync_engine.begin() as conn:
        conn.execute(text("DELETE FROM Incidents"))
        conn.execute(text("DELETE FROM Codes"))
        conn.execute(text("DELETE FROM Neighborhoods"))
        for row in incidents:
            conn.execute(text(
                "INSERT INTO Incidents (case_number, date_time, code, incident, police_grid, "
                "neighborhood_number, block) VALUES (:case_number, :date_time, :code, :incident, "
                ":police_grid, :neighborhood_number, :block)"
            ), row)
        for code, incident_type in codes:
            conn.execute(text("INSERT INTO Codes (code, incident_type) VALUES (:c, :t)"),
                         {"c": code, "t": incident_type})
        for number, name in neighborhoods:
            conn.execute(text(
                "INSERT INTO Neighborhoods (neighborhood_number, neighborhood_name) VALUES (:n, :name)"
            ), {"n": number, "name": name})


def case_numbers():
    with sync_engine.connect() as conn:
        return [r[0] for r in conn.execute(text("SELECT case_number FROM Incidents ORDER BY case_number"))]


@pytest.fixture(autouse=True)
def empty_store():
    seed()
    yield


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
