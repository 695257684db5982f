"""Interactive copilot chat layered over whatever stage results exist.

A session is independent of pipeline progress: it can be opened before a
run starts, while it is running, or after it finished. Each turn reads the
results present at send time; it never waits on the pipeline.

Only one turn may be in flight. A ``send`` while busy is dropped, not
queued.
"""
from __future__ import annotations
import logging
import re
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple
from interviewedge.core.engine import PipelineRun
from interviewedge.core.gateway import AgentGateway
from interviewedge.core.normalize import normalize, serialize_result
from interviewedge.core.samples import SAMPLE_RESULTS
from interviewedge.core.workflow import AgentRole, PipelineStage, company_display_name

log = logging.getLogger(__name__)

SNAPSHOT_BUDGET = 1500
MAX_SUGGESTIONS = 3
MIN_SUGGESTION_LENGTH = 6

APOLOGY_REPLY = "I received your message but could not generate a proper response."
ERROR_REPLY = "Sorry, I encountered an error processing your request. Please try again."
NETWORK_REPLY = "A network error occurred. Please check your connection and try again."


class CopilotMode(str, Enum):
    COACHING = "Coaching"
    CRITIQUE = "Critique"
    SIMULATION = "Simulation"
    QA = "Q&A"


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str
    mode: Optional[str] = None
    references: Optional[str] = None
    suggestions: Optional[str] = None


def parse_suggestions(raw: Any) -> List[str]:
    if isinstance(raw, str):
        parts = (p.strip() for p in re.split(r"[,;\n]", raw))
    elif isinstance(raw, (list, tuple)):
        # some agents answer with a JSON array instead of a delimited string
        parts = (p.strip() for p in raw if isinstance(p, str))
    else:
        return []
    return [p for p in parts if len(p) >= MIN_SUGGESTION_LENGTH][:MAX_SUGGESTIONS]


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def _suggestion_text(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        value = "; ".join(p.strip() for p in value if isinstance(p, str) and p.strip())
    return value if isinstance(value, str) and value else None


def _reply_body(parsed: Dict[str, Any], response: Any) -> str:
    message = response.get("message") if isinstance(response, dict) else None
    for candidate in (parsed.get("response"), parsed.get("text"), message):
        if candidate is None:
            continue
        text = candidate if isinstance(candidate, str) else str(candidate)
        if text.strip():
            return text
    return APOLOGY_REPLY


class CopilotSession:
    def __init__(
        self,
        gateway: AgentGateway,
        run: PipelineRun | None = None,
        mode: CopilotMode = CopilotMode.COACHING,
        sample: bool = False,
        session_id: str | None = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.gateway = gateway
        self.run = run
        self.mode = mode
        self.sample = sample
        self.busy = False
        self._transcript: List[ChatMessage] = []
        self._suggestions: List[str] = []
        self._generation = 0

    @property
    def transcript(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._transcript)

    @property
    def suggestions(self) -> List[str]:
        return list(self._suggestions)

    def attach(self, run: PipelineRun | None) -> None:
        self.run = run

    def reset(self) -> None:
        self._transcript = []
        self._suggestions = []
        # a turn still in flight belongs to the old transcript
        self._generation += 1

    def _results(self) -> Mapping[PipelineStage, Mapping[str, Any]]:
        if self.sample:
            return SAMPLE_RESULTS
        if self.run is None:
            return {}
        return self.run.results()

    def build_prompt(self, text: str) -> str:
        organization = self.run.organization if self.run else ""
        role = self.run.target_role if self.run else ""
        results = self._results()
        research, documents, prep = (
            serialize_result(dict(results.get(stage) or {}), SNAPSHOT_BUDGET)
            for stage in (PipelineStage.RESEARCH, PipelineStage.DOCUMENTS, PipelineStage.PREPARATION)
        )
        return (
            f"Mode: {self.mode.value}\n"
            f"Context: Company={company_display_name(organization)}, Role={role}.\n"
            f"Research Summary: {research}\n"
            f"Documents Summary: {documents}\n"
            f"Prep Summary: {prep}\n\n"
            f"User: {text}"
        )

    async def send(self, text: str, mode: CopilotMode | None = None) -> Optional[ChatMessage]:
        """Run one chat turn. Returns the assistant message, or None if the turn was ignored."""
        text = (text or "").strip()
        if not text:
            return None
        if self.busy:
            log.debug("Chat turn ignored, previous turn still pending", extra={"run_id": self._run_id(), "stage": "copilot"})
            return None
        if mode is not None:
            self.mode = mode

        self._transcript.append(ChatMessage(role="user", content=text))
        self.busy = True
        generation = self._generation
        try:
            reply, suggestions = await self._exchange(text)
        finally:
            self.busy = False

        if generation != self._generation:
            log.info("Session reset during turn, dropping reply", extra={"run_id": self._run_id(), "stage": "copilot"})
            return None
        self._transcript.append(reply)
        self._suggestions = suggestions
        return reply

    async def _exchange(self, text: str) -> Tuple[ChatMessage, List[str]]:
        try:
            envelope = await self.gateway.invoke(AgentRole.COPILOT, self.build_prompt(text))
        except Exception as e:
            log.warning("Chat turn failed: %s", e, extra={"run_id": self._run_id(), "stage": "copilot"})
            return ChatMessage(role="assistant", content=NETWORK_REPLY), []

        if not envelope.success:
            log.warning("Copilot agent reported failure: %s", envelope.error, extra={"run_id": self._run_id(), "stage": "copilot"})
            return ChatMessage(role="assistant", content=ERROR_REPLY), []

        parsed = normalize(envelope)
        raw_suggestions = parsed.get("follow_up_suggestions")
        reply = ChatMessage(
            role="assistant",
            content=_reply_body(parsed, envelope.response),
            mode=_optional_text(parsed.get("mode")) or self.mode.value,
            references=_optional_text(parsed.get("references")),
            suggestions=_suggestion_text(raw_suggestions),
        )
        return reply, parse_suggestions(raw_suggestions)

    def _run_id(self) -> str:
        return self.run.run_id if self.run else "-"
