from fastapi import APIRouter, Depends, HTTPException
from interviewedge.agents.copilot import CopilotSession
from interviewedge.api.deps import get_gateway, get_store
from interviewedge.core.gateway import AgentGateway
from interviewedge.core.store import RunStore
from interviewedge.schemas.chat import (
    ChatMessageOut,
    ChatTurnRequest,
    ChatTurnResponse,
    SessionCreateRequest,
    SessionResponse,
)

router = APIRouter(prefix="/sessions")

def _require_session(store: RunStore, session_id: str) -> CopilotSession:
    session = store.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session

@router.post("", response_model=SessionResponse, status_code=201)
def create_session(
    req: SessionCreateRequest,
    store: RunStore = Depends(get_store),
    gateway: AgentGateway = Depends(get_gateway),
):
    run = None
    if req.run_id:
        run = store.get_run(req.run_id)
        if not run:
            raise HTTPException(status_code=404, detail="Run not found")
    session = store.add_session(CopilotSession(gateway, run=run, mode=req.mode, sample=req.sample))
    return SessionResponse.from_session(session)

@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, store: RunStore = Depends(get_store)):
    return SessionResponse.from_session(_require_session(store, session_id))

@router.post("/{session_id}/messages", response_model=ChatTurnResponse)
async def send_message(session_id: str, req: ChatTurnRequest, store: RunStore = Depends(get_store)):
    session = _require_session(store, session_id)
    reply = await session.send(req.text, mode=req.mode)
    if reply is None:
        return ChatTurnResponse(ignored=True, suggestions=session.suggestions)
    return ChatTurnResponse(
        ignored=False,
        reply=ChatMessageOut.from_message(reply),
        suggestions=session.suggestions,
    )

@router.delete("/{session_id}/messages", response_model=SessionResponse)
def reset_session(session_id: str, store: RunStore = Depends(get_store)):
    session = _require_session(store, session_id)
    session.reset()
    return SessionResponse.from_session(session)
