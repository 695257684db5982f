from pydantic_settings import BaseSettings, SettingsConfigDict
from interviewedge.core.workflow import AgentRole

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "interviewedge"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    agent_api_base: str = "http://localhost:9000/v1"
    # None leaves remote calls unbounded; an unresponsive agent stalls its stage
    agent_timeout_seconds: float | None = None

    research_agent_id: str = "research-coordinator"
    documents_agent_id: str = "documents-coordinator"
    preparation_agent_id: str = "preparation-coordinator"
    copilot_agent_id: str = "interview-copilot"

    def agent_id_for(self, role: AgentRole) -> str:
        mapping = {
            AgentRole.RESEARCH: self.research_agent_id,
            AgentRole.DOCUMENTS: self.documents_agent_id,
            AgentRole.PREPARATION: self.preparation_agent_id,
            AgentRole.COPILOT: self.copilot_agent_id,
        }
        return mapping[role]

settings = Settings()
