from typing import List
from fastapi import APIRouter
from interviewedge.core.workflow import AGENT_CATALOG
from interviewedge.schemas.runs import AgentInfoOut

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/agents", response_model=List[AgentInfoOut])
def list_agents():
    return [AgentInfoOut.from_info(info) for info in AGENT_CATALOG]
