from __future__ import annotations
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
from interviewedge.agents.registry import AgentRegistry
from interviewedge.core.gateway import AgentGateway, Attachment
from interviewedge.core.normalize import extract_files, normalize
from interviewedge.core.workflow import (
    STAGE_ORDER,
    InvalidTransition,
    LaunchRejected,
    PhaseStatus,
    PipelineRunContext,
    PipelineStage,
    StageOutcome,
    can_transition,
)

log = logging.getLogger(__name__)


class PipelineRun:
    """State of one pipeline run, created at launch and dropped at reset.

    Everything a presentation layer reads lives here: per-stage status,
    per-stage outcome (result + files) and the run-level error banner.
    """

    def __init__(self, organization: str, target_role: str, run_id: str | None = None):
        self.run_id = run_id or str(uuid.uuid4())
        self.organization = organization
        self.target_role = target_role
        self.context: Optional[PipelineRunContext] = None
        self.statuses: Dict[PipelineStage, PhaseStatus] = {s: PhaseStatus.PENDING for s in STAGE_ORDER}
        self.outcomes: Dict[PipelineStage, StageOutcome] = {s: StageOutcome(stage=s) for s in STAGE_ORDER}
        self.error_message: Optional[str] = None
        self.active_stage: Optional[PipelineStage] = None
        self.finished = False
        self.discarded = False
        self.created_at = datetime.now(timezone.utc)
        self.finished_at: Optional[datetime] = None

    def set_status(self, stage: PipelineStage, status: PhaseStatus) -> None:
        current = self.statuses[stage]
        if not can_transition(current, status):
            raise InvalidTransition(f"{stage.value}: {current.value} -> {status.value}")
        self.statuses[stage] = status

    def record_error(self, message: str) -> None:
        # first error of the run wins
        if self.error_message is None:
            self.error_message = message

    def results(self) -> Dict[PipelineStage, Dict[str, Any]]:
        return {stage: outcome.result for stage, outcome in self.outcomes.items()}

    def completed_count(self) -> int:
        return sum(1 for s in self.statuses.values() if s == PhaseStatus.COMPLETED)

    def discard(self) -> None:
        self.discarded = True


class PhaseOrchestrator:
    def __init__(
        self,
        gateway: AgentGateway,
        registry: AgentRegistry | None = None,
        on_change: Callable[[PipelineRun], None] | None = None,
    ):
        self.gateway = gateway
        self.registry = registry or AgentRegistry.default()
        self.on_change = on_change

    def _changed(self, run: PipelineRun) -> None:
        if self.on_change is not None:
            self.on_change(run)

    def prepare(self, organization: str, target_role: str) -> PipelineRun:
        if not organization or not organization.strip():
            raise LaunchRejected("organization identifier is required")
        if not target_role or not target_role.strip():
            raise LaunchRejected("target role is required")
        return PipelineRun(organization=organization.strip(), target_role=target_role.strip())

    async def launch(self, organization: str, target_role: str, attachments: Sequence[Attachment] = ()) -> PipelineRun:
        run = self.prepare(organization, target_role)
        return await self.execute(run, attachments)

    async def execute(self, run: PipelineRun, attachments: Sequence[Attachment] = ()) -> PipelineRun:
        if run.context is not None:
            raise RuntimeError(f"run {run.run_id} was already executed")
        asset_ids = await self._upload(run, attachments)
        run.context = PipelineRunContext(
            organization=run.organization,
            target_role=run.target_role,
            asset_ids=asset_ids,
        )
        log.info("Starting pipeline", extra={"run_id": run.run_id, "stage": "-"})

        for stage in STAGE_ORDER:
            if run.discarded:
                log.info("Run discarded, skipping remaining stages", extra={"run_id": run.run_id, "stage": stage.value})
                return run
            await self._run_stage(run, stage)

        run.active_stage = None
        run.finished = True
        run.finished_at = datetime.now(timezone.utc)
        self._changed(run)
        log.info(
            "Pipeline finished: %d/%d stages completed", run.completed_count(), len(STAGE_ORDER),
            extra={"run_id": run.run_id, "stage": "-"},
        )
        return run

    async def _upload(self, run: PipelineRun, attachments: Sequence[Attachment]) -> Tuple[str, ...]:
        if not attachments:
            return ()
        try:
            result = await self.gateway.upload_attachments(attachments)
        except Exception as e:
            log.warning("Attachment upload failed, continuing without attachments: %s", e,
                        extra={"run_id": run.run_id, "stage": "-"})
            return ()
        if not result.success:
            log.warning("Attachment upload rejected, continuing without attachments",
                        extra={"run_id": run.run_id, "stage": "-"})
            return ()
        return tuple(result.asset_ids)

    async def _run_stage(self, run: PipelineRun, stage: PipelineStage) -> None:
        agent = self.registry.get(stage)
        run.set_status(stage, PhaseStatus.ACTIVE)
        run.active_stage = stage
        self._changed(run)
        log.info("Running stage", extra={"run_id": run.run_id, "stage": stage.value})

        try:
            prompt = agent.build_prompt(run.context, run.results())
            envelope = await self.gateway.invoke(agent.role, prompt, run.context.asset_ids)
        except Exception as e:
            if run.discarded:
                return
            log.exception("Stage raised", extra={"run_id": run.run_id, "stage": stage.value})
            self._fail(run, stage, f"{stage.label} phase encountered an error: {e}")
            return

        if run.discarded:
            return
        if not envelope.success:
            log.error("Stage failed", extra={"run_id": run.run_id, "stage": stage.value})
            self._fail(run, stage, envelope.error or f"{stage.label} phase failed")
            return

        run.outcomes[stage] = StageOutcome(
            stage=stage,
            result=normalize(envelope),
            files=tuple(extract_files(envelope)),
        )
        run.set_status(stage, PhaseStatus.COMPLETED)
        self._changed(run)
        log.info(
            "Stage completed with %d fields and %d files",
            len(run.outcomes[stage].result), len(run.outcomes[stage].files),
            extra={"run_id": run.run_id, "stage": stage.value},
        )

    def _fail(self, run: PipelineRun, stage: PipelineStage, message: str) -> None:
        run.set_status(stage, PhaseStatus.ERROR)
        run.record_error(message)
        self._changed(run)
