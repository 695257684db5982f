from interviewedge.agents.base import StageAgent, PriorResults
from interviewedge.core.normalize import serialize_result
from interviewedge.core.workflow import AgentRole, PipelineRunContext, PipelineStage

class ResearchAgent(StageAgent):
    stage = PipelineStage.RESEARCH
    role = AgentRole.RESEARCH

    def build_prompt(self, context: PipelineRunContext, prior: PriorResults) -> str:
        return (
            f"Research the company at {context.organization} for the role of {context.target_role}. "
            "Provide comprehensive analysis including executive dossier, competitive brief, "
            "skill matrix, and culture map."
        )

class DocumentsAgent(StageAgent):
    stage = PipelineStage.DOCUMENTS
    role = AgentRole.DOCUMENTS
    research_budget = 3000

    def build_prompt(self, context: PipelineRunContext, prior: PriorResults) -> str:
        research = serialize_result(prior.get(PipelineStage.RESEARCH) or {}, self.research_budget)
        return (
            f"Using the following research context: {research}\n\n"
            f"Create strategic documents for the role of {context.target_role} at {context.company_name}. "
            "Include optimized resume, cover letter, HR outreach email, positioning summary, "
            "and behavioral answer bank."
        )

class PreparationAgent(StageAgent):
    stage = PipelineStage.PREPARATION
    role = AgentRole.PREPARATION
    research_budget = 2000
    documents_budget = 2000

    def build_prompt(self, context: PipelineRunContext, prior: PriorResults) -> str:
        research = serialize_result(prior.get(PipelineStage.RESEARCH) or {}, self.research_budget)
        documents = serialize_result(prior.get(PipelineStage.DOCUMENTS) or {}, self.documents_budget)
        return (
            f"Using research: {research}\nDocuments: {documents}\n\n"
            f"Create comprehensive preparation materials for {context.target_role} at {context.company_name}. "
            "Include question bank, technical guide, case walkthroughs, and tactical plan."
        )
