"""Cut validation and commit endpoints."""

from fastapi import APIRouter

from sheetstock.application import CommitInput
from sheetstock.web.dependencies import ServiceFactoryDep
from sheetstock.web.exceptions import CutRejectedError
from sheetstock.web.schemas.requests import CheckCutsRequest, CommitCutsRequest
from sheetstock.web.schemas.responses import (
    CheckCutsSchema,
    CommitResultSchema,
    RejectionSchema,
)

router = APIRouter(prefix="/cuts", tags=["cuts"])


@router.post("/validate", response_model=CheckCutsSchema)
async def validate_cuts(
    request: CheckCutsRequest, factory: ServiceFactoryDep
) -> CheckCutsSchema:
    """Check each cut against the source without recording anything.

    Every cut is judged on its own, so the response lists the accepted cuts
    alongside the rejected ones.
    """
    output = factory.create_check_command().execute(
        request.source_kind,
        request.source_id,
        [cut.to_domain() for cut in request.cuts],
    )
    return CheckCutsSchema(
        is_valid=output.is_valid,
        accepted=[{"width": c.width, "height": c.height} for c in output.accepted],
        rejections=[RejectionSchema.from_rejection(r) for r in output.rejections],
    )


@router.post("/commit", response_model=CommitResultSchema, status_code=201)
async def commit_cuts(
    request: CommitCutsRequest, factory: ServiceFactoryDep
) -> CommitResultSchema:
    """Commit a cut batch. Nothing is written when the batch is rejected.

    Raises:
        CutRejectedError: Mapped to 404 (not_found) or 422 (other reasons).
    """
    commit_input = CommitInput(
        source_kind=request.source_kind,
        source_id=request.source_id,
        cuts=[cut.to_domain() for cut in request.cuts],
        policy=request.policy or factory.default_policy,
        remnant=request.remnant.to_domain() if request.remnant else None,
    )
    output = factory.create_commit_command().execute(commit_input)
    if output.rejection is not None:
        raise CutRejectedError(output.rejection)
    assert output.result is not None
    return CommitResultSchema.from_result(output.result)
