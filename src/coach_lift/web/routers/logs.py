"""Workout log routes."""

from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import JSONResponse

from ...db.repositories import ProgramRepository, WorkoutLogRepository
from ...models.workout_log import state_from_dict, state_to_dict
from ...services import WorkoutLogService

router = APIRouter(prefix="/logs", tags=["logs"])


def get_service(request: Request) -> WorkoutLogService:
    return WorkoutLogService(WorkoutLogRepository(request.app.state.db_path))


@router.get("/{program_id}")
async def get_logs(
    request: Request,
    program_id: str,
    user_id: str = Query(...),
    week: int | None = None,
    day: int | None = None,
):
    """Logged sets of a program, grouped per exercise."""
    result = await get_service(request).load(program_id, user_id, week, day)
    if not result.ok:
        return JSONResponse({"error": result.error}, status_code=502)
    return {
        "program_id": program_id,
        "week": week,
        "day": day,
        "exercises": state_to_dict(result.data),
    }


@router.put("/{program_id}/{week}/{day}")
async def save_logs(
    request: Request,
    program_id: str,
    week: int,
    day: int,
    payload: dict = Body(...),
):
    """Replace the logs of one program day.

    Body: {"user_id": str, "exercises": {name: {"sets": [...], "notes": str}}}
    """
    user_id = payload.get("user_id")
    if not user_id:
        return JSONResponse({"error": "user_id is required"}, status_code=422)
    try:
        state = state_from_dict(payload.get("exercises") or {})
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return JSONResponse({"error": f"Invalid workout data: {e}"}, status_code=422)

    stored = await ProgramRepository(request.app.state.db_path).get(program_id, user_id)
    if not stored:
        return JSONResponse({"error": "Program not found"}, status_code=404)

    result = await get_service(request).save(program_id, user_id, week, day, state)
    if not result.ok:
        return JSONResponse({"error": result.error}, status_code=502)
    return {"saved": len(result.data), "rows": [row.to_dict() for row in result.data]}
