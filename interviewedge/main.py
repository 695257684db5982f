import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from interviewedge.core.config import settings
from interviewedge.core.logging import configure_logging
from interviewedge.core.engine import PhaseOrchestrator
from interviewedge.core.gateway import AgentGateway
from interviewedge.core.store import RunStore
from interviewedge.api.routes import router as api_router

configure_logging(settings.log_level)
log = logging.getLogger(__name__)


def create_app(gateway: AgentGateway | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        log.info("Starting API server (agents at %s)", app.state.gateway.api_base)
        yield
        log.info("Shutting down API server, dropping %d run(s)", len(app.state.store.runs))

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.gateway = gateway or AgentGateway.from_settings(settings)
    app.state.orchestrator = PhaseOrchestrator(app.state.gateway)
    app.state.store = RunStore()
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
