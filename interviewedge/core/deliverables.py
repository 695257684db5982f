from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple
from interviewedge.core.workflow import STAGE_ORDER, PipelineStage

SUMMARY_FIELD = "summary"


@dataclass(frozen=True)
class DeliverableSpec:
    field: str
    title: str
    phase: PipelineStage


@dataclass(frozen=True)
class Deliverable:
    field: str
    title: str
    phase: PipelineStage
    content: str

    @property
    def ready(self) -> bool:
        return len(self.content) > 0


CATALOG: Tuple[DeliverableSpec, ...] = (
    DeliverableSpec("executive_dossier", "Executive Company Dossier", PipelineStage.RESEARCH),
    DeliverableSpec("competitive_brief", "Competitive Positioning Brief", PipelineStage.RESEARCH),
    DeliverableSpec("skill_matrix", "Skill Matrix & Gap Analysis", PipelineStage.RESEARCH),
    DeliverableSpec("culture_map", "Culture Fit Risk Map", PipelineStage.RESEARCH),
    DeliverableSpec("optimized_resume", "Optimized Resume", PipelineStage.DOCUMENTS),
    DeliverableSpec("cover_letter", "Cover Letter", PipelineStage.DOCUMENTS),
    DeliverableSpec("hr_outreach_email", "HR Outreach Email", PipelineStage.DOCUMENTS),
    DeliverableSpec("positioning_summary", "Executive Positioning Summary", PipelineStage.DOCUMENTS),
    DeliverableSpec("behavioral_answer_bank", "Behavioral Answer Bank", PipelineStage.DOCUMENTS),
    DeliverableSpec("question_bank", "Question Bank", PipelineStage.PREPARATION),
    DeliverableSpec("technical_guide", "Technical Mastery Guide", PipelineStage.PREPARATION),
    DeliverableSpec("case_walkthroughs", "Case Study Walkthroughs", PipelineStage.PREPARATION),
    DeliverableSpec("tactical_plan", "Tactical Preparation Plan", PipelineStage.PREPARATION),
)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def build_deliverables(
    results: Mapping[PipelineStage, Mapping[str, Any]],
    phase: Optional[PipelineStage] = None,
) -> List[Deliverable]:
    """One entry per catalog field, in catalog order; missing fields have empty content."""
    out = []
    for spec in CATALOG:
        if phase is not None and spec.phase != phase:
            continue
        content = _text((results.get(spec.phase) or {}).get(spec.field))
        out.append(Deliverable(spec.field, spec.title, spec.phase, content))
    return out


def count_ready(results: Mapping[PipelineStage, Mapping[str, Any]]) -> int:
    return sum(1 for d in build_deliverables(results) if d.ready)


def phase_summaries(results: Mapping[PipelineStage, Mapping[str, Any]]) -> Dict[PipelineStage, str]:
    return {stage: _text((results.get(stage) or {}).get(SUMMARY_FIELD)) for stage in STAGE_ORDER}


def progress_percent(completed: int) -> int:
    return round(completed / len(STAGE_ORDER) * 100)
