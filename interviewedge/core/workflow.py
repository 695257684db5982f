from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class PipelineStage(str, Enum):
    RESEARCH = "research"
    DOCUMENTS = "documents"
    PREPARATION = "preparation"

    @property
    def label(self) -> str:
        return self.value.capitalize()


STAGE_ORDER: Tuple[PipelineStage, ...] = (
    PipelineStage.RESEARCH,
    PipelineStage.DOCUMENTS,
    PipelineStage.PREPARATION,
)


class PhaseStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"


_ALLOWED_TRANSITIONS = {
    PhaseStatus.PENDING: {PhaseStatus.ACTIVE},
    PhaseStatus.ACTIVE: {PhaseStatus.COMPLETED, PhaseStatus.ERROR},
    PhaseStatus.COMPLETED: set(),
    PhaseStatus.ERROR: set(),
}


def can_transition(current: PhaseStatus, target: PhaseStatus) -> bool:
    return target in _ALLOWED_TRANSITIONS[current]


class AgentRole(str, Enum):
    """Logical remote agents; each maps to one configured endpoint id."""
    RESEARCH = "research"
    DOCUMENTS = "documents"
    PREPARATION = "preparation"
    COPILOT = "copilot"


@dataclass(frozen=True)
class AgentInfo:
    role: AgentRole
    name: str
    purpose: str


AGENT_CATALOG: Tuple[AgentInfo, ...] = (
    AgentInfo(AgentRole.RESEARCH, "Research & Intelligence Coordinator",
              "Company research, competitive analysis, skill gap mapping"),
    AgentInfo(AgentRole.DOCUMENTS, "Strategic Documents Coordinator",
              "Resume optimization, cover letters, outreach emails"),
    AgentInfo(AgentRole.PREPARATION, "Preparation & Simulation Coordinator",
              "Question banks, technical guides, case studies"),
    AgentInfo(AgentRole.COPILOT, "Interview Copilot Chat",
              "Real-time coaching, critique, simulation, Q&A"),
)


class LaunchRejected(ValueError):
    """Required run inputs are missing; no remote call has been made."""


class InvalidTransition(ValueError):
    pass


def company_display_name(organization: str) -> str:
    """Short company name from a URL-ish identifier, e.g. https://www.stripe.com/jobs -> stripe."""
    if not organization or not organization.strip():
        return "Company"
    host = re.sub(r"^https?://", "", organization.strip())
    host = re.sub(r"^www\.", "", host)
    name = host.split("/")[0].split(".")[0]
    return name or "Company"


@dataclass(frozen=True)
class PipelineRunContext:
    organization: str
    target_role: str
    asset_ids: Tuple[str, ...] = ()

    @property
    def company_name(self) -> str:
        return company_display_name(self.organization)


@dataclass(frozen=True)
class ArtifactFile:
    url: str
    name: str | None = None
    format_type: str | None = None


@dataclass(frozen=True)
class StageOutcome:
    """Settled output of one stage; swapped in whole, never edited."""
    stage: PipelineStage
    result: Dict[str, Any] = field(default_factory=dict)
    files: Tuple[ArtifactFile, ...] = ()
