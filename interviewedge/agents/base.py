from typing import Any, Dict, Mapping
from interviewedge.core.workflow import AgentRole, PipelineRunContext, PipelineStage

PriorResults = Mapping[PipelineStage, Dict[str, Any]]

class StageAgent:
    stage: PipelineStage
    role: AgentRole
    def build_prompt(self, context: PipelineRunContext, prior: PriorResults) -> str:
        raise NotImplementedError
