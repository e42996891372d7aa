"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sheetstock.domain import AllocationError, RecordNotFoundError, Rejection, RejectionReason


class CutRejectedError(Exception):
    """Raised when the engine refuses a cut batch."""

    def __init__(self, rejection: Rejection) -> None:
        self.rejection = rejection
        super().__init__(rejection.message)


def _rejection_response(rejection: Rejection) -> JSONResponse:
    status_code = 404 if rejection.reason is RejectionReason.NOT_FOUND else 422
    return JSONResponse(
        status_code=status_code,
        content={
            "error": rejection.message,
            "error_type": rejection.reason.value,
            "details": {"cut_index": rejection.cut_index},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CutRejectedError)
    async def cut_rejected_handler(request: Request, exc: CutRejectedError) -> JSONResponse:
        return _rejection_response(exc.rejection)

    @app.exception_handler(AllocationError)
    async def allocation_error_handler(
        request: Request, exc: AllocationError
    ) -> JSONResponse:
        return _rejection_response(exc.to_rejection())

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(
        request: Request, exc: RecordNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"kind": exc.kind, "id": exc.record_id},
            },
        )
