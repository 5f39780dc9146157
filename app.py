#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from config import AppConfig
from services.session_service import SessionService
from storage.store import PersistentStore
from ui.main_window import MainWindow
from ui.tk_scheduler import TkScheduler


def main():
    config = AppConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = PersistentStore(db_path=config.db_path)

    root = tk.Tk()
    session_service = SessionService.from_config(config, store, TkScheduler(root))

    MainWindow(root, session_service, config)
    session_service.start()
    try:
        root.mainloop()
    finally:
        session_service.close()
        store.close()


if __name__ == "__main__":
    main()
