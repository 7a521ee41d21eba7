"""
Sleep interval endpoints.

Start / end tracking, manual entries, edits and deletes.
"""

import datetime
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from snoozy.api.dependencies import get_now, get_store
from snoozy.schemas.sleep_interval import (ManualEntryCreate, SleepIntervalResponse, SleepIntervalUpdate,
                                           build_interval, )
from snoozy.services.interval_store import IntervalStore
from snoozy.services.manual_entry import add_manual_entry

router = APIRouter()


@router.get("", summary="List sleep intervals, optionally for one day.", response_model=list[SleepIntervalResponse], )
def list_intervals(day: Optional[datetime.date] = Query(None, description="Local calendar day the sleep started on"),
                   store: IntervalStore = Depends(get_store), now: datetime.datetime = Depends(get_now), ):
    if day:
        intervals = store.for_day(day, now.tzinfo)
    else:
        intervals = sorted(store.intervals, key=lambda i: i.start_time, reverse=True)
    return [SleepIntervalResponse.from_interval(i, now) for i in intervals]


@router.get("/ongoing", summary="Get the ongoing sleep, if any.", response_model=Optional[SleepIntervalResponse], )
def get_ongoing(store: IntervalStore = Depends(get_store), now: datetime.datetime = Depends(get_now), ):
    current = store.ongoing()
    return SleepIntervalResponse.from_interval(current, now) if current else None


@router.post("/start", summary="Start tracking a sleep now.", response_model=SleepIntervalResponse,
             status_code=status.HTTP_201_CREATED, )
def start_sleep(store: IntervalStore = Depends(get_store), now: datetime.datetime = Depends(get_now), ):
    if store.ongoing():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A sleep is already ongoing")
    return SleepIntervalResponse.from_interval(store.start(now), now)


@router.post("/end", summary="End the ongoing sleep now.", response_model=SleepIntervalResponse, )
def end_sleep(store: IntervalStore = Depends(get_store), now: datetime.datetime = Depends(get_now), ):
    closed = store.end(now)
    if closed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No ongoing sleep")
    return SleepIntervalResponse.from_interval(closed, now)


@router.post("/manual", summary="Add a manually entered sleep.", response_model=list[SleepIntervalResponse],
             status_code=status.HTTP_201_CREATED, )
def add_manual(data: ManualEntryCreate, store: IntervalStore = Depends(get_store),
               now: datetime.datetime = Depends(get_now), ):
    """A sleep crossing midnight is stored as two records split at midnight."""
    entries = add_manual_entry(store, data.day, data.start, data.end, now.tzinfo)
    return [SleepIntervalResponse.from_interval(e, now) for e in entries]


@router.put("/{interval_id}", summary="Edit a sleep interval.", response_model=SleepIntervalResponse, )
def update_interval(interval_id: uuid.UUID, data: SleepIntervalUpdate, store: IntervalStore = Depends(get_store),
                    now: datetime.datetime = Depends(get_now), ):
    interval = build_interval(data.start_time, data.end_time, interval_id=interval_id)
    if not store.update(interval):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep interval not found")
    return SleepIntervalResponse.from_interval(interval, now)


@router.delete("/{interval_id}", summary="Delete a sleep interval.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_interval(interval_id: uuid.UUID, store: IntervalStore = Depends(get_store), ):
    if not store.delete(interval_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep interval not found")
