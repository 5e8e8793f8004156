from fastapi import APIRouter, Depends, Path
from typing import Annotated
import time
import logging

from shopassist.api.deps import sessions_dep
from shopassist.api.v1.schemas.catalog import ChatHistoryOut, ChatMessageIn
from shopassist.domain.services.conversation import QUICK_SUGGESTIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

SessionId = Annotated[str, Path(min_length=1, max_length=128)]


@router.get("/suggestions")
async def get_suggestions():
    return {"items": list(QUICK_SUGGESTIONS)}


@router.post("/{session_id}/messages")
async def send_message(session_id: SessionId, body: ChatMessageIn, sessions = Depends(sessions_dep)):
    """
    Send one message to the scripted assistant.
    The reply depends on the message *and* on how many turns this session has had.
    """
    t0 = time.perf_counter()
    router_ = sessions.get(session_id)
    reply = router_.send(body.text)
    logger.info(
        "Response: chat session=%s step=%s has_results=%s in %.4fs",
        session_id, reply.step, reply.has_results, time.perf_counter() - t0,
    )
    return reply


@router.post("/{session_id}/reset")
async def reset_session(session_id: SessionId, sessions = Depends(sessions_dep)):
    router_ = sessions.reset(session_id)
    return ChatHistoryOut(session_id=session_id, step=router_.step, messages=router_.history)


@router.get("/{session_id}/history")
async def get_history(session_id: SessionId, sessions = Depends(sessions_dep)):
    router_ = sessions.peek(session_id)
    return ChatHistoryOut(session_id=session_id, step=router_.step, messages=router_.history)
