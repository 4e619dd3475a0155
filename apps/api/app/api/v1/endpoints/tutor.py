from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.v1.deps import get_tutor_service
from app.schemas.tutor import ChatRequest, CheckAnswerRequest, GeneratePlanRequest, SolveRequest
from app.services.tutor_service import TutorService

router = APIRouter(tags=["tutor"])


@router.get("/")
def status(service: TutorService = Depends(get_tutor_service)):
    return service.status()


@router.get("/test-ollama")
async def test_ollama(service: TutorService = Depends(get_tutor_service)):
    status_code, body = await service.probe_backend()
    return JSONResponse(status_code=status_code, content=body)


@router.post("/solve")
async def solve(payload: SolveRequest | None = None, service: TutorService = Depends(get_tutor_service)):
    return await service.solve(payload or SolveRequest())


@router.post("/check-answer")
async def check_answer(
    payload: CheckAnswerRequest | None = None,
    service: TutorService = Depends(get_tutor_service),
):
    return await service.check_answer(payload or CheckAnswerRequest())


@router.post("/generate-plan")
async def generate_plan(
    payload: GeneratePlanRequest | None = None,
    service: TutorService = Depends(get_tutor_service),
):
    return await service.generate_plan(payload or GeneratePlanRequest())


@router.post("/chat")
async def chat(payload: ChatRequest | None = None, service: TutorService = Depends(get_tutor_service)):
    return await service.chat(payload or ChatRequest())
