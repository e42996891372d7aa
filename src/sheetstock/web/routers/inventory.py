"""Inventory listing endpoints."""

from fastapi import APIRouter

from sheetstock.domain import MaterialKind
from sheetstock.web.dependencies import ServiceFactoryDep
from sheetstock.web.schemas.responses import RecordSchema, SourceSchema

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/{kind}", response_model=list[RecordSchema])
async def list_records(kind: MaterialKind, factory: ServiceFactoryDep) -> list[RecordSchema]:
    """List every record of one kind."""
    records = factory.get_inventory_service().list(kind)
    return [RecordSchema.from_record(record) for record in records]


@router.get("/{kind}/selectable", response_model=list[SourceSchema])
async def list_selectable(kind: MaterialKind, factory: ServiceFactoryDep) -> list[SourceSchema]:
    """List the records of one kind that can currently be cut from."""
    sources = factory.get_source_resolver().list_selectable(kind)
    return [SourceSchema.from_source(source) for source in sources]


@router.get("/{kind}/{record_id}", response_model=RecordSchema)
async def get_record(
    kind: MaterialKind, record_id: str, factory: ServiceFactoryDep
) -> RecordSchema:
    """Fetch one record. Unknown ids return 404."""
    return RecordSchema.from_record(factory.get_inventory_service().get(kind, record_id))
