#!/usr/bin/env python3
"""
Run the three-stage interview preparation pipeline against the configured
agent service, print the deliverables, then optionally open a copilot chat.
Usage: python scripts/run_pipeline.py https://stripe.com "Senior Product Manager" [--file resume.pdf] [--chat]
"""
import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from interviewedge.agents.copilot import CopilotMode, CopilotSession
from interviewedge.core.config import settings
from interviewedge.core.deliverables import build_deliverables, count_ready, progress_percent
from interviewedge.core.engine import PhaseOrchestrator, PipelineRun
from interviewedge.core.gateway import AgentGateway
from interviewedge.core.logging import configure_logging
from interviewedge.core.workflow import LaunchRejected


def print_status(run: PipelineRun) -> None:
    phases = ", ".join(f"{stage.value}={status.value}" for stage, status in run.statuses.items())
    print(f"[{progress_percent(run.completed_count()):3d}%] {phases}")


def load_attachments(paths):
    attachments = []
    for p in paths:
        path = Path(p)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        attachments.append((path.name, path.read_bytes(), content_type))
    return attachments


async def chat_loop(session: CopilotSession) -> None:
    print("Copilot ready. Commands: /mode <Coaching|Critique|Simulation|Q&A>, /reset, /quit")
    while True:
        try:
            text = input(f"({session.mode.value}) > ").strip()
        except EOFError:
            return
        if text in ("/quit", "/exit"):
            return
        if text == "/reset":
            session.reset()
            continue
        if text.startswith("/mode "):
            try:
                session.mode = CopilotMode(text[len("/mode "):].strip())
            except ValueError:
                print("Unknown mode")
            continue
        reply = await session.send(text)
        if reply is None:
            continue
        print(f"\n{reply.content}\n")
        if reply.references:
            print(f"References: {reply.references}")
        for i, s in enumerate(session.suggestions, 1):
            print(f"  {i}. {s}")


async def main(args) -> int:
    gateway = AgentGateway.from_settings(settings)
    orchestrator = PhaseOrchestrator(gateway, on_change=print_status)

    try:
        run = await orchestrator.launch(args.organization, args.role, load_attachments(args.file))
    except LaunchRejected as e:
        print(f"ERROR: {e}")
        return 2

    print()
    print("=" * 80)
    print(f"Pipeline finished for {args.role} at {run.context.company_name}")
    if run.error_message:
        print(f"First error: {run.error_message}")
    print("=" * 80)

    results = run.results()
    print(f"{count_ready(results)} deliverable(s) generated")
    for d in build_deliverables(results):
        if d.ready:
            print(f"\n## {d.title} ({d.phase.value})\n{d.content}")
    for stage, outcome in run.outcomes.items():
        for f in outcome.files:
            print(f"  [{stage.value}] {f.name or f.url}: {f.url}")

    if args.chat:
        await chat_loop(CopilotSession(gateway, run=run))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("organization", help="Company URL or name")
    parser.add_argument("role", help="Target role")
    parser.add_argument("--file", action="append", default=[], help="Job description or resume to attach")
    parser.add_argument("--chat", action="store_true", help="Open a copilot chat after the run")
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(main(parser.parse_args())))
