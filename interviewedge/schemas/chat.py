from pydantic import BaseModel, Field
from typing import List, Optional
from interviewedge.agents.copilot import ChatMessage, CopilotMode, CopilotSession

class SessionCreateRequest(BaseModel):
    run_id: Optional[str] = None
    mode: CopilotMode = CopilotMode.COACHING
    sample: bool = False

class ChatTurnRequest(BaseModel):
    text: str = Field(..., examples=["How should I answer the salary question?"])
    mode: Optional[CopilotMode] = None

class ChatMessageOut(BaseModel):
    role: str
    content: str
    mode: Optional[str] = None
    references: Optional[str] = None
    suggestions: Optional[str] = None

    @classmethod
    def from_message(cls, m: ChatMessage) -> "ChatMessageOut":
        return cls(role=m.role, content=m.content, mode=m.mode, references=m.references, suggestions=m.suggestions)

class SessionResponse(BaseModel):
    id: str
    run_id: Optional[str] = None
    mode: CopilotMode
    sample: bool
    busy: bool
    transcript: List[ChatMessageOut] = []
    suggestions: List[str] = []

    @classmethod
    def from_session(cls, s: CopilotSession) -> "SessionResponse":
        return cls(
            id=s.session_id,
            run_id=s.run.run_id if s.run else None,
            mode=s.mode,
            sample=s.sample,
            busy=s.busy,
            transcript=[ChatMessageOut.from_message(m) for m in s.transcript],
            suggestions=s.suggestions,
        )

class ChatTurnResponse(BaseModel):
    ignored: bool
    reply: Optional[ChatMessageOut] = None
    suggestions: List[str] = []
