"""Trigger endpoints for form submissions, recaps and estimates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from macro_tracker.api.schemas import MacrosModel, RecapResponse, SubmissionResponse
from macro_tracker.domain.errors import EntryNotFoundError, SubmissionError

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(tags=["triggers"])


def _get_trigger_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.trigger_token


async def require_trigger_token(
    x_trigger_token: str | None = Header(default=None),
    trigger_token: str = Depends(_get_trigger_token),
) -> None:
    """Ensure requests include a valid trigger token."""
    if not x_trigger_token or x_trigger_token != trigger_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post(
    "/submissions/{entry_id}",
    dependencies=[Depends(require_trigger_token)],
    response_model_exclude_none=True,
)
async def handle_submission(entry_id: int, request: Request) -> SubmissionResponse:
    """Resolve macros and totals for a newly submitted log entry."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.submission_handler.handle_submission(entry_id)
    except EntryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except SubmissionError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    if result is None:
        return SubmissionResponse(status="skipped", entry_id=entry_id)
    return SubmissionResponse.from_result(result)


@router.post(
    "/recaps",
    dependencies=[Depends(require_trigger_token)],
    response_model_exclude_none=True,
)
async def produce_recap(request: Request) -> RecapResponse:
    """Append and send the daily recap."""
    container: AppContainer = request.app.state.container
    record = await container.recap_producer.produce_recap()
    if record is None:
        return RecapResponse(status="empty")
    return RecapResponse.from_record(record)


@router.get("/estimate", dependencies=[Depends(require_trigger_token)])
async def estimate_macros(
    request: Request,
    item: str = "",
    quantity: float | None = Query(default=None, gt=0),
    units: str | None = None,
    brand_info: str | None = None,
) -> MacrosModel:
    """Estimate macros for a free-text food description."""
    container: AppContainer = request.app.state.container
    macros = await container.estimator.estimate(item, quantity, units, brand_info)
    if macros is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Macro estimation failed"
        )
    return MacrosModel.from_macros(macros)
