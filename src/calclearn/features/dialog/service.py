from __future__ import annotations

import logging
import os
import random
import secrets
import threading
from dataclasses import dataclass, replace

from ...core.exercise import ExerciseGenerator
from .controller import DialogController, DialogResponse
from .schemas import (
    CardPayload,
    OutputSpeech,
    RepromptPayload,
    ResponseBody,
    SkillRequest,
    SkillResponse,
)
from .state import DrillSession
from .turns import Launch, TurnEvent, decode_intent

__all__ = ["SkillConfig", "SkillService", "render_response"]

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"

_CARD_TITLE = "Session"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SkillConfig:
    """Configuration for the skill endpoint."""

    seed: int | None = None
    welcome_on_launch: bool = False

    @classmethod
    def from_env(cls) -> SkillConfig:
        """Read ``CALCLEARN_SEED`` and ``CALCLEARN_WELCOME_ON_LAUNCH``."""

        raw_seed = os.environ.get("CALCLEARN_SEED", "").strip()
        welcome = os.environ.get("CALCLEARN_WELCOME_ON_LAUNCH", "").strip().lower()
        return cls(
            seed=int(raw_seed) if raw_seed else None,
            welcome_on_launch=welcome in _TRUTHY,
        )


def render_response(reply: DialogResponse, session: DrillSession) -> SkillResponse:
    """Encode a dialog reply into the platform's response envelope."""

    speech = OutputSpeech(text=reply.speech)
    reprompt = RepromptPayload(output_speech=OutputSpeech(text=reply.reprompt)) if reply.expects_answer else None
    return SkillResponse(
        session_attributes=session.to_attributes(),
        response=ResponseBody(
            output_speech=speech,
            card=CardPayload(title=_CARD_TITLE, content=reply.speech),
            reprompt=reprompt,
            should_end_session=not reply.expects_answer,
        ),
    )


class SkillService:
    """Turns platform envelopes into dialog turns, one at a time."""

    def __init__(self, config: SkillConfig | None = None) -> None:
        config = config or SkillConfig()
        seed = config.seed if config.seed is not None else secrets.SystemRandom().getrandbits(32)
        self.config = replace(config, seed=seed)
        self.controller = DialogController(
            ExerciseGenerator(rng=random.Random(seed)),
            welcome_on_launch=self.config.welcome_on_launch,
        )
        self._lock = threading.Lock()

    def handle(self, envelope: SkillRequest) -> SkillResponse:
        request = envelope.request
        session = envelope.session
        context = {"request_id": request.request_id, "session_id": session.session_id}

        if request.type == SESSION_ENDED_REQUEST:
            logger.info("session ended", extra={**context, "reason": request.reason})
            return SkillResponse(response=ResponseBody(should_end_session=True))

        turn = self._decode(envelope)
        if session.new:
            logger.info("session started", extra=context)

        state = DrillSession.from_attributes(session.attributes)
        with self._lock:
            reply = self.controller.handle(turn, state)
        logger.info(
            "turn handled",
            extra={**context, "turn": type(turn).__name__, "state": state.state.value},
        )
        return render_response(reply, state)

    def _decode(self, envelope: SkillRequest) -> TurnEvent:
        request = envelope.request
        if request.type == LAUNCH_REQUEST:
            return Launch()
        if request.type == INTENT_REQUEST:
            return decode_intent(request.intent)
        raise ValueError(f"unsupported request type '{request.type}'")
