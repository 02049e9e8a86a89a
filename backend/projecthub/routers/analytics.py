"""Analytics rollup API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database import get_db
from projecthub.schemas.analytics import AnalyticsOut
from projecthub.services import analytics_service

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsOut)
def get_analytics(db: Session = Depends(get_db)):
    return analytics_service.get_analytics(db)
