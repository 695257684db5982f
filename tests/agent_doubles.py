"""Scripted stand-ins for the remote agent service."""
from typing import Any, Dict, List
from interviewedge.core.gateway import Envelope, UploadResult
from interviewedge.core.workflow import AgentRole


def ok(result: Any = None, files: List[dict] | None = None, message: str | None = None) -> Envelope:
    response: Dict[str, Any] = {"result": result}
    if message is not None:
        response["message"] = message
    module_outputs = {"artifact_files": files} if files is not None else None
    return Envelope(success=True, response=response, module_outputs=module_outputs)


def failed(error: str | None = None) -> Envelope:
    return Envelope(success=False, error=error)


class ScriptedGateway:
    """Returns (or raises) scripted replies per agent role, recording every call."""
    api_base = "http://agents.test/v1"

    def __init__(self, replies: Dict[AgentRole, List[Any]] | None = None, upload: Any = None):
        self.replies = {role: list(items) for role, items in (replies or {}).items()}
        self.upload = upload if upload is not None else UploadResult(success=True, asset_ids=["asset-1"])
        self.calls: List[tuple] = []
        self.uploads: List[list] = []
        self.before_reply = None

    async def invoke(self, role, prompt, asset_ids=()):
        self.calls.append((role, prompt, tuple(asset_ids)))
        if self.before_reply is not None:
            await self.before_reply(role, prompt)
        queue = self.replies.get(role) or [ok({})]
        reply = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def upload_attachments(self, files):
        self.uploads.append(list(files))
        if isinstance(self.upload, BaseException):
            raise self.upload
        return self.upload

    def prompts_for(self, role: AgentRole) -> List[str]:
        return [prompt for r, prompt, _ in self.calls if r == role]


RESEARCH = {
    "executive_dossier": "Dossier body",
    "competitive_brief": "Competitors body",
    "skill_matrix": "Skills body",
    "culture_map": "Culture body",
    "summary": "Research summary",
}
DOCUMENTS = {
    "optimized_resume": "Resume body",
    "cover_letter": "Letter body",
    "hr_outreach_email": "Email body",
    "positioning_summary": "Positioning body",
    "behavioral_answer_bank": "STAR answers",
    "summary": "Documents summary",
}
PREPARATION = {
    "question_bank": "Questions body",
    "technical_guide": "Guide body",
    "case_walkthroughs": "Cases body",
    "tactical_plan": "Plan body",
    "summary": "Prep summary",
}


