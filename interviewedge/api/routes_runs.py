import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, HTTPException, Response, UploadFile
from interviewedge.api.deps import get_orchestrator, get_store
from interviewedge.core.deliverables import build_deliverables, count_ready
from interviewedge.core.engine import PhaseOrchestrator, PipelineRun
from interviewedge.core.samples import SAMPLE_RESULTS
from interviewedge.core.store import RunStore
from interviewedge.core.workflow import LaunchRejected, PipelineStage
from interviewedge.schemas.runs import DeliverableOut, DeliverablesResponse, RunResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/runs")

def _require_run(store: RunStore, run_id: str) -> PipelineRun:
    run = store.get_run(run_id)
    if not run:
        raise HTTPException(status_code=404, detail="Run not found")
    return run

@router.post("", response_model=RunResponse, status_code=202)
async def create_run(
    background: BackgroundTasks,
    organization: str = Form(..., examples=["https://stripe.com"]),
    target_role: str = Form(..., examples=["Senior Product Manager"]),
    files: Optional[List[UploadFile]] = File(None),
    store: RunStore = Depends(get_store),
    orchestrator: PhaseOrchestrator = Depends(get_orchestrator),
):
    try:
        run = orchestrator.prepare(organization, target_role)
    except LaunchRejected as e:
        raise HTTPException(status_code=422, detail=str(e))

    attachments = []
    for f in files or []:
        attachments.append((f.filename or "attachment", await f.read(), f.content_type or "application/octet-stream"))

    store.add_run(run)
    background.add_task(orchestrator.execute, run, attachments)
    log.info("Run queued with %d attachment(s)", len(attachments), extra={"run_id": run.run_id, "stage": "-"})
    return RunResponse.from_run(run)

@router.get("/{run_id}", response_model=RunResponse)
def get_run(run_id: str, store: RunStore = Depends(get_store)):
    return RunResponse.from_run(_require_run(store, run_id))

@router.get("/{run_id}/deliverables", response_model=DeliverablesResponse)
def get_deliverables(
    run_id: str,
    phase: Literal["all", "research", "documents", "preparation"] = "all",
    sample: bool = False,
    store: RunStore = Depends(get_store),
):
    run = _require_run(store, run_id)
    results = SAMPLE_RESULTS if sample else run.results()
    selected = None if phase == "all" else PipelineStage(phase)
    return DeliverablesResponse(
        run_id=run.run_id,
        phase=phase,
        total_ready=count_ready(results),
        deliverables=[DeliverableOut.from_deliverable(d) for d in build_deliverables(results, selected)],
    )

@router.delete("/{run_id}", status_code=204)
def reset_run(run_id: str, store: RunStore = Depends(get_store)):
    if store.discard_run(run_id) is None:
        raise HTTPException(status_code=404, detail="Run not found")
    log.info("Run discarded", extra={"run_id": run_id, "stage": "-"})
    return Response(status_code=204)
