# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from dataclasses import dataclass

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from user_accounts.infrastructure.db import ENGINE
from user_accounts.infrastructure.db.models import User, UserToken
from user_accounts.shared.logging import logger

REQUIRED_TABLES = (User.__tablename__, UserToken.__tablename__)


@dataclass(slots=True, frozen=True)
class HealthReport:
    database: str
    latency_ms: float | None = None
    missing_tables: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.database == "ok" and not self.missing_tables

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"ok": self.ok, "database": self.database}
        if self.latency_ms is not None:
            payload["database_ms"] = round(self.latency_ms, 2)
        if self.missing_tables:
            payload["missing_tables"] = list(self.missing_tables)
        return payload


def check_database() -> HealthReport:
    """Round-trip the database and confirm the account tables exist."""
    started = time.perf_counter()
    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
            present = set(inspect(connection).get_table_names())
    except SQLAlchemyError as exc:
        logger.error(f"health: database check failed: {type(exc).__name__}")
        return HealthReport(database="error")

    latency = (time.perf_counter() - started) * 1000.0
    missing = tuple(name for name in REQUIRED_TABLES if name not in present)
    if missing:
        logger.warning(f"health: schema incomplete, missing={missing}")
    return HealthReport(database="ok", latency_ms=latency, missing_tables=missing)


__all__ = ["HealthReport", "check_database"]
