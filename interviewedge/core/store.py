from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional
from interviewedge.agents.copilot import CopilotSession
from interviewedge.core.engine import PipelineRun


@dataclass
class RunStore:
    """Process-lifetime registry of runs and copilot sessions."""
    runs: Dict[str, PipelineRun] = field(default_factory=dict)
    sessions: Dict[str, CopilotSession] = field(default_factory=dict)

    def add_run(self, run: PipelineRun) -> PipelineRun:
        self.runs[run.run_id] = run
        return run

    def get_run(self, run_id: str) -> Optional[PipelineRun]:
        return self.runs.get(run_id)

    def discard_run(self, run_id: str) -> Optional[PipelineRun]:
        run = self.runs.pop(run_id, None)
        if run is None:
            return None
        run.discard()
        for session in self.sessions.values():
            if session.run is run:
                session.attach(None)
        return run

    def add_session(self, session: CopilotSession) -> CopilotSession:
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[CopilotSession]:
        return self.sessions.get(session_id)
