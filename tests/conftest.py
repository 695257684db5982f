import json
import pytest
from interviewedge.core.workflow import AgentRole
from agent_doubles import DOCUMENTS, PREPARATION, RESEARCH, ScriptedGateway, ok


@pytest.fixture
def stage_payloads():
    return {
        AgentRole.RESEARCH: RESEARCH,
        AgentRole.DOCUMENTS: DOCUMENTS,
        AgentRole.PREPARATION: PREPARATION,
    }


@pytest.fixture
def happy_gateway(stage_payloads):
    return ScriptedGateway({
        AgentRole.RESEARCH: [ok(stage_payloads[AgentRole.RESEARCH], files=[
            {"file_url": "https://files.test/dossier.pdf", "name": "dossier.pdf", "format_type": "pdf"},
        ])],
        # string-encoded result, as some agents reply
        AgentRole.DOCUMENTS: [ok(json.dumps(stage_payloads[AgentRole.DOCUMENTS]))],
        AgentRole.PREPARATION: [ok(stage_payloads[AgentRole.PREPARATION])],
    })
