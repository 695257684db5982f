from dataclasses import dataclass
from typing import Dict
from interviewedge.core.workflow import PipelineStage
from interviewedge.agents.base import StageAgent
from interviewedge.agents.impl_stages import ResearchAgent, DocumentsAgent, PreparationAgent

@dataclass
class AgentRegistry:
    mapping: Dict[PipelineStage, StageAgent]

    def get(self, stage: PipelineStage) -> StageAgent:
        return self.mapping[stage]

    @staticmethod
    def default() -> "AgentRegistry":
        return AgentRegistry(mapping={
            PipelineStage.RESEARCH: ResearchAgent(),
            PipelineStage.DOCUMENTS: DocumentsAgent(),
            PipelineStage.PREPARATION: PreparationAgent(),
        })
