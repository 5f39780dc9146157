#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
from typing import Optional

from storage.db import Database

logger = logging.getLogger(__name__)

COUNT_KEY = "count"


def parse_count(raw: Optional[str]) -> int:
    """Stored counter text -> count. Absent, malformed or negative gives 0."""
    if raw is None:
        return 0
    try:
        n = int(str(raw).strip())
    except ValueError:
        logger.warning("malformed stored count %r, using 0", raw)
        return 0
    if n < 0:
        logger.warning("negative stored count %r, using 0", raw)
        return 0
    return n


class CounterRepo:
    """The set counter, kept as one row of the app_state table."""

    def __init__(self, db: Database, key: str = COUNT_KEY):
        self.db = db
        self.key = key

    def get_count(self) -> int:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (self.key,),
        ).fetchone()
        return parse_count(row["value"] if row else None)

    def set_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("Count cannot be negative.")
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (self.key, str(int(count))),
        )
        self.db.conn.commit()
