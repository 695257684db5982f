from fastapi import Request
from interviewedge.core.engine import PhaseOrchestrator
from interviewedge.core.gateway import AgentGateway
from interviewedge.core.store import RunStore

def get_store(request: Request) -> RunStore:
    return request.app.state.store

def get_gateway(request: Request) -> AgentGateway:
    return request.app.state.gateway

def get_orchestrator(request: Request) -> PhaseOrchestrator:
    return request.app.state.orchestrator
