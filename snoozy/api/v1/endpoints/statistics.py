"""
Statistics endpoints — summary cards, chart series, bedtime reminder.
"""

import datetime

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from snoozy.api.dependencies import get_engine, get_now
from snoozy.db.session import get_db
from snoozy.schemas.statistics import (BedtimeResponse, DailySleepData, DailyTimeData, Period, ReminderPlan,
                                       SleepSummary, )
from snoozy.services.reminder_service import ReminderService
from snoozy.stats.engine import StatisticsEngine

router = APIRouter()


@router.get("/summary", summary="Aggregate sleep statistics for a period.", response_model=SleepSummary, )
def get_summary(period: Period = Query(Period.WEEK), engine: StatisticsEngine = Depends(get_engine),
                now: datetime.datetime = Depends(get_now), ):
    return engine.summary(period, now)


@router.get("/daily", summary="Hours slept per day.", response_model=list[DailySleepData], )
def get_daily_totals(period: Period = Query(Period.WEEK), engine: StatisticsEngine = Depends(get_engine),
                     now: datetime.datetime = Depends(get_now), ):
    return engine.daily_totals(period, now)


@router.get("/sleep-times", summary="Evening bedtime per day.", response_model=list[DailyTimeData], )
def get_sleep_times(period: Period = Query(Period.WEEK), engine: StatisticsEngine = Depends(get_engine),
                    now: datetime.datetime = Depends(get_now), ):
    return engine.sleep_time_data(period, now)


@router.get("/wake-times", summary="Morning wake-up time per day.", response_model=list[DailyTimeData], )
def get_wake_times(period: Period = Query(Period.WEEK), engine: StatisticsEngine = Depends(get_engine),
                   now: datetime.datetime = Depends(get_now), ):
    return engine.wake_time_data(period, now)


@router.get("/bedtime", summary="Average bedtime of the past week.", response_model=BedtimeResponse, )
def get_bedtime(engine: StatisticsEngine = Depends(get_engine), now: datetime.datetime = Depends(get_now), ):
    bedtime = engine.average_bedtime(now)
    return BedtimeResponse(bedtime=bedtime, has_data=bedtime is not None)


@router.get("/reminder", summary="Plan the daily bedtime reminder.", response_model=ReminderPlan, )
def get_reminder_plan(db: Session = Depends(get_db), engine: StatisticsEngine = Depends(get_engine),
                      now: datetime.datetime = Depends(get_now), ):
    return ReminderService(db, engine).plan(now)
