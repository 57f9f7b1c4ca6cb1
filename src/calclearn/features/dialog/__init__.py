"""Dialog feature: turn handling, platform schemas, service and API router."""

from .controller import DialogController, DialogResponse
from .router import create_skill_routers
from .schemas import SkillRequest, SkillResponse
from .service import SkillConfig, SkillService
from .state import DialogState, DrillSession
from .turns import Launch, ProvideAnswer, ProvideName, TurnEvent, Unrecognized, decode_intent

__all__ = [
    "DialogController",
    "DialogResponse",
    "DialogState",
    "DrillSession",
    "Launch",
    "ProvideAnswer",
    "ProvideName",
    "SkillConfig",
    "SkillRequest",
    "SkillResponse",
    "SkillService",
    "TurnEvent",
    "Unrecognized",
    "create_skill_routers",
    "decode_intent",
]
