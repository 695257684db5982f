from pydantic import BaseModel
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from interviewedge.core.deliverables import Deliverable, phase_summaries, progress_percent
from interviewedge.core.engine import PipelineRun
from interviewedge.core.workflow import AgentInfo, ArtifactFile, PhaseStatus, PipelineStage, company_display_name

class ArtifactFileOut(BaseModel):
    file_url: str
    name: Optional[str] = None
    format_type: Optional[str] = None

    @classmethod
    def from_file(cls, f: ArtifactFile) -> "ArtifactFileOut":
        return cls(file_url=f.url, name=f.name, format_type=f.format_type)

class RunResponse(BaseModel):
    id: str
    organization: str
    target_role: str
    company_name: str
    phases: Dict[PipelineStage, PhaseStatus]
    active_stage: Optional[PipelineStage] = None
    error_message: Optional[str] = None
    progress_percent: int
    finished: bool
    files: Dict[PipelineStage, List[ArtifactFileOut]] = {}
    summaries: Dict[PipelineStage, str] = {}
    results: Dict[PipelineStage, Dict[str, Any]] = {}
    created_at: datetime
    finished_at: Optional[datetime] = None

    @classmethod
    def from_run(cls, run: PipelineRun) -> "RunResponse":
        return cls(
            id=run.run_id,
            organization=run.organization,
            target_role=run.target_role,
            company_name=company_display_name(run.organization),
            phases=dict(run.statuses),
            active_stage=run.active_stage,
            error_message=run.error_message,
            progress_percent=progress_percent(run.completed_count()),
            finished=run.finished,
            files={s: [ArtifactFileOut.from_file(f) for f in o.files] for s, o in run.outcomes.items()},
            summaries=phase_summaries(run.results()),
            results=run.results(),
            created_at=run.created_at,
            finished_at=run.finished_at,
        )

class DeliverableOut(BaseModel):
    field: str
    title: str
    phase: PipelineStage
    content: str

    @classmethod
    def from_deliverable(cls, d: Deliverable) -> "DeliverableOut":
        return cls(field=d.field, title=d.title, phase=d.phase, content=d.content)

class DeliverablesResponse(BaseModel):
    run_id: str
    phase: Literal["all", "research", "documents", "preparation"] = "all"
    total_ready: int
    deliverables: List[DeliverableOut]

class AgentInfoOut(BaseModel):
    role: str
    name: str
    purpose: str

    @classmethod
    def from_info(cls, info: AgentInfo) -> "AgentInfoOut":
        return cls(role=info.role.value, name=info.name, purpose=info.purpose)
