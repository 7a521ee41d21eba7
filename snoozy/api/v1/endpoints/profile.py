"""
Profile endpoints — baby profile and reminder settings.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from snoozy.db.session import get_db
from snoozy.schemas.profile import AppSettings, BabyProfile
from snoozy.services.profile_service import ProfileService

router = APIRouter()


@router.get("", summary="Get the baby profile.", response_model=BabyProfile, )
def get_profile(db: Session = Depends(get_db)):
    return ProfileService(db).get_profile()


@router.put("", summary="Update the baby profile.", response_model=BabyProfile, )
def update_profile(data: BabyProfile, db: Session = Depends(get_db)):
    """Invalid height/weight keep the previous value; a future birthday becomes today."""
    return ProfileService(db).update_profile(data)


@router.get("/settings", summary="Get reminder settings.", response_model=AppSettings, )
def get_settings(db: Session = Depends(get_db)):
    return ProfileService(db).get_settings()


@router.put("/settings", summary="Update reminder settings.", response_model=AppSettings, )
def update_settings(data: AppSettings, db: Session = Depends(get_db)):
    return ProfileService(db).update_settings(data)
