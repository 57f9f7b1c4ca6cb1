from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from .schemas import SkillRequest
from .service import SkillService

__all__ = ["create_skill_routers"]


class _SkillController:
    def __init__(self, service: SkillService) -> None:
        self.service = service

    def turn(self, body: SkillRequest) -> JSONResponse:
        try:
            result = self.service.handle(body)
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return JSONResponse(result.to_dict())


def create_skill_routers(service: SkillService) -> tuple[APIRouter, APIRouter]:
    controller = _SkillController(service)

    router_v1 = APIRouter(prefix="/api/v1/skill", tags=["skill"])
    router_legacy = APIRouter(prefix="/api/skill", tags=["skill-legacy"])

    # Plain ``def`` routes run in FastAPI's threadpool; SkillService serializes turns.
    @router_v1.post("")
    def post_turn(body: SkillRequest) -> JSONResponse:
        return controller.turn(body)

    @router_legacy.post("")
    def post_turn_legacy(body: SkillRequest) -> JSONResponse:
        return controller.turn(body)

    return router_v1, router_legacy
