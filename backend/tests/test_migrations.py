# backend/tests/test_migrations.py
from __future__ import annotations

from pathlib import Path

import sqlalchemy as sa
from alembic import command
from alembic.config import Config

from app.database import Base

_BACKEND = Path(__file__).resolve().parents[1]


def _alembic_config(url: str) -> Config:
    # Ohne alembic.ini → kein fileConfig(), Logging der Tests bleibt unangetastet
    cfg = Config()
    cfg.set_main_option("script_location", str(_BACKEND / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def _schema(path: Path) -> dict:
    engine = sa.create_engine(f"sqlite:///{path}")
    try:
        insp = sa.inspect(engine)
        out = {}
        for table in insp.get_table_names():
            if table == "alembic_version":
                continue
            out[table] = {
                "columns": [
                    (c["name"], str(c["type"]), c["nullable"], str(c.get("default")))
                    for c in insp.get_columns(table)
                ],
                "checks": sorted((c["name"], c["sqltext"]) for c in insp.get_check_constraints(table)),
                "indexes": sorted(
                    (i["name"], tuple(i["column_names"]), bool(i["unique"]))
                    for i in insp.get_indexes(table)
                ),
            }
        return out
    finally:
        engine.dispose()


def test_upgrade_matches_models_and_downgrade_removes_tables(tmp_path):
    migrated = tmp_path / "migrated.db"
    cfg = _alembic_config(f"sqlite+aiosqlite:///{migrated}")
    command.upgrade(cfg, "head")

    reference = tmp_path / "reference.db"
    ref_engine = sa.create_engine(f"sqlite:///{reference}")
    Base.metadata.create_all(ref_engine)
    ref_engine.dispose()

    schema = _schema(migrated)
    assert set(schema) == {"chat_messages", "geography_topics"}
    assert schema == _schema(reference)
    assert schema["geography_topics"]["checks"]

    command.downgrade(cfg, "base")
    assert _schema(migrated) == {}
