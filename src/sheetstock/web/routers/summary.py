"""Inventory summary endpoint."""

from fastapi import APIRouter

from sheetstock.web.dependencies import ServiceFactoryDep
from sheetstock.web.schemas.responses import SummarySchema

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("", response_model=SummarySchema)
async def get_summary(factory: ServiceFactoryDep) -> SummarySchema:
    """Stock counts and areas across the whole inventory."""
    return SummarySchema.from_summary(factory.get_summarizer().summarize())
