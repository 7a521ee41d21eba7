"""
Shared API dependencies.

The composition root of a request: one database session, one interval
store on top of it, and one statistics engine reading that store.
"""

import datetime
from typing import Optional

from fastapi import Depends, Query
from sqlmodel import Session

from snoozy.db.session import get_db
from snoozy.services.interval_store import IntervalStore
from snoozy.stats.engine import StatisticsEngine
from snoozy.stats.periods import resolve_now


def get_store(db: Session = Depends(get_db)) -> IntervalStore:
    return IntervalStore(db)


def get_engine(store: IntervalStore = Depends(get_store)) -> StatisticsEngine:
    return StatisticsEngine(store)


def get_now(now: Optional[datetime.datetime] = Query(
    None, description="Reference time (defaults to the current time; naive values use the configured timezone)"
), ) -> datetime.datetime:
    return resolve_now(now)
