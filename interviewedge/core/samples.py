"""Canned stage results for demos and offline copilot sessions."""
from interviewedge.core.workflow import PipelineStage

SAMPLE_RESEARCH = {
    "executive_dossier": (
        "# Executive Dossier\n\n## Overview\nA payments infrastructure company serving online businesses "
        "of every size.\n\n## Leadership\n- Founder-led, engineering-heavy executive team\n\n"
        "## Recent Developments\n- Expansion into embedded finance\n- New bank account verification product"
    ),
    "competitive_brief": (
        "# Competitive Positioning Brief\n\n## Competitors\n1. Enterprise acquirers with strong European presence\n"
        "2. SMB point-of-sale platforms\n3. Consumer wallet brands\n\n## Moat\n- Developer experience\n- Global coverage"
    ),
    "skill_matrix": (
        "# Skill Matrix\n\n- Product strategy: required expert, current advanced\n"
        "- Data analysis: required advanced, current intermediate\n\n## Gaps\n1. Payments domain depth\n2. Regulatory awareness"
    ),
    "culture_map": (
        "# Culture Fit Risk Map\n\n## Alignment\n- Writing-first culture\n- Builder mindset\n\n"
        "## Watch Areas\n- High autonomy\n- Deep technical probing in interviews"
    ),
    "summary": "Research complete: engineering-led culture, payments expertise is the main gap, 4 deliverables ready.",
}

SAMPLE_DOCUMENTS = {
    "optimized_resume": (
        "# Optimized Resume\n\n## Summary\nProduct manager with 8 years building developer platforms and API products.\n\n"
        "## Highlights\n- Launched a payment orchestration platform\n- Tripled developer adoption after an API redesign"
    ),
    "cover_letter": (
        "# Cover Letter\n\nDear Hiring Team,\n\nTreating APIs as products is how I have worked for the last five years. "
        "I would welcome the chance to bring that to your platform team."
    ),
    "hr_outreach_email": (
        "# HR Outreach Email\n\nSubject: Product Manager application\n\nHi,\n\nI recently applied and wanted to share "
        "why the role stands out to me. Would you be open to a short call?\n\nBest regards"
    ),
    "positioning_summary": (
        "# Positioning Summary\n\n## Narrative\nA payments-native product leader who ships developer infrastructure.\n\n"
        "## Talking Points\n1. Scale\n2. Developer empathy\n3. Global launches"
    ),
    "behavioral_answer_bank": (
        "# Behavioral Answer Bank\n\n## A difficult product decision\n**Situation:** Backward compatibility vs. API redesign\n"
        "**Action:** Impact analysis and a staged migration\n**Result:** 95% of customers migrated in three months"
    ),
    "summary": "Documents complete: resume, cover letter, outreach email, positioning and STAR answers tailored to the role.",
}

SAMPLE_PREP = {
    "question_bank": (
        "# Question Bank\n\n## Strategy\n1. How would you prioritize a payment links roadmap?\n\n"
        "## Technical\n2. Walk through authorization, capture and settlement.\n\n"
        "## Behavioral\n3. Tell me about saying no to a senior stakeholder."
    ),
    "technical_guide": (
        "# Technical Guide\n\n- Authorization, capture, settlement\n- Idempotency keys for safe retries\n"
        "- Webhooks for asynchronous operations\n- Date-based API versioning"
    ),
    "case_walkthroughs": (
        "# Case Walkthroughs\n\n## Market entry\n- Regulation, local payment methods, partner-led launch\n\n"
        "## Identity verification product\n- Build vs. buy, pricing per verification"
    ),
    "tactical_plan": (
        "# Tactical Plan\n\n## Week 1\n- Company docs and blog\n- Industry fundamentals\n\n"
        "## Week 2\n- System design practice\n- Mock behavioral interviews"
    ),
    "summary": "Preparation complete: question bank, technical guide, two case walkthroughs and a two-week plan.",
}

SAMPLE_RESULTS = {
    PipelineStage.RESEARCH: SAMPLE_RESEARCH,
    PipelineStage.DOCUMENTS: SAMPLE_DOCUMENTS,
    PipelineStage.PREPARATION: SAMPLE_PREP,
}
