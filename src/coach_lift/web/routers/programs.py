"""Program generation and storage routes."""

from pathlib import Path

import structlog
from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import JSONResponse

from ...db.repositories import ProgramRepository, WorkoutLogRepository
from ...generators import generate_program
from ...models.program import Program
from ...models.questionnaire import ProgramFormData
from ...services import WorkoutLogService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/programs", tags=["programs"])


def get_db_path(request: Request) -> Path:
    """Get the database path from app state."""
    return request.app.state.db_path


def _generate(payload: dict) -> Program | JSONResponse:
    """Validate the form and generate, or build the 422 response."""
    try:
        form = ProgramFormData.from_dict(payload)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=422)

    program = generate_program(form)
    if program.is_error:
        return JSONResponse(
            {"error": program.description, "program": program.to_dict()},
            status_code=422,
        )
    return program


@router.post("/generate")
async def generate(payload: dict = Body(...)):
    """Generate a program without storing it."""
    result = _generate(payload)
    if isinstance(result, JSONResponse):
        return result
    return result.to_dict()


@router.post("", status_code=201)
async def create_program(request: Request, payload: dict = Body(...)):
    """Generate a program from `form` and store it for `user_id`."""
    user_id = payload.get("user_id")
    if not user_id:
        return JSONResponse({"error": "user_id is required"}, status_code=422)

    result = _generate(payload.get("form") or {})
    if isinstance(result, JSONResponse):
        return result

    repo = ProgramRepository(get_db_path(request))
    program_id = await repo.create(user_id, result)
    logger.info("program_saved", program_id=program_id, user_id=user_id)

    stored = await repo.get(program_id)
    return stored.to_dict()


@router.get("")
async def list_programs(request: Request, user_id: str = Query(...)):
    """List a user's programs, newest first."""
    repo = ProgramRepository(get_db_path(request))
    stored_programs = await repo.list_for_user(user_id)
    return {"programs": [p.to_dict() for p in stored_programs]}


@router.get("/{program_id}")
async def get_program(request: Request, program_id: str, user_id: str | None = None):
    """Get a stored program."""
    repo = ProgramRepository(get_db_path(request))
    stored = await repo.get(program_id, user_id)
    if not stored:
        return JSONResponse({"error": "Program not found"}, status_code=404)
    return stored.to_dict()


@router.delete("/{program_id}")
async def delete_program(request: Request, program_id: str, user_id: str = Query(...)):
    """Delete a program, its logs first."""
    db_path = get_db_path(request)
    repo = ProgramRepository(db_path)

    stored = await repo.get(program_id, user_id)
    if not stored:
        return JSONResponse({"error": "Program not found"}, status_code=404)

    service = WorkoutLogService(WorkoutLogRepository(db_path))
    logs_result = await service.delete_program_logs(program_id, user_id)
    if not logs_result.ok:
        return JSONResponse({"error": logs_result.error}, status_code=502)

    await repo.delete(program_id)
    logger.info("program_deleted", program_id=program_id, logs_deleted=logs_result.data)
    return {"deleted": program_id, "logs_deleted": logs_result.data}
