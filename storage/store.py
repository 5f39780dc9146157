# -*- coding: utf-8 -*-

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from storage.db import Database
from storage.repos import CounterRepo

logger = logging.getLogger(__name__)


class PersistentStore:
    """
    Asynchronous access to the persisted set counter.

    All SQLite work runs on a single worker thread, so calls are applied in
    submission order. load_count() and save_count() return futures; callers
    on the UI thread must not block on them.
    """

    def __init__(self, db_path: str = "counter.db"):
        self.db_path = db_path
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="store")
        self._db: Optional[Database] = None
        self._repo: Optional[CounterRepo] = None
        self._closed = False
        self._opened = self._executor.submit(self._open)

    def _open(self) -> None:
        self._db = Database(db_path=self.db_path)
        self._db.init_schema()
        self._repo = CounterRepo(self._db)

    def _require_repo(self) -> CounterRepo:
        # surfaces the open error (if any) to the caller's future
        self._opened.result()
        return self._repo

    def load_count(self) -> "Future[int]":
        return self._executor.submit(lambda: self._require_repo().get_count())

    def save_count(self, count: int) -> "Future[None]":
        return self._executor.submit(lambda: self._require_repo().set_count(count))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._executor.submit(self._close_db)
        self._executor.shutdown(wait=True)

    def _close_db(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None
