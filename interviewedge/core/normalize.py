"""Reading agent envelopes whose ``result`` shape is not contractually fixed.

The nested result is first classified into one of three variants and only
then turned into a mapping, so the rest of the code never inspects raw types:

* ``Empty``   - envelope or result absent / falsy
* ``Raw``     - result arrived as text (possibly JSON-encoded)
* ``Decoded`` - result arrived already structured

``normalize`` and ``extract_files`` are total: they return ``{}`` / ``[]``
rather than raise.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Union
from interviewedge.core.workflow import ArtifactFile

log = logging.getLogger(__name__)

FALLBACK_FIELD = "text"


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Raw:
    text: str


@dataclass(frozen=True)
class Decoded:
    value: Any


ResultPayload = Union[Empty, Raw, Decoded]


def _get(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def classify(envelope: Any) -> ResultPayload:
    result = _get(_get(envelope, "response"), "result")
    if not result:
        return Empty()
    if isinstance(result, str):
        return Raw(result)
    return Decoded(result)


def _as_mapping(value: Any, raw: str | None = None) -> Dict[str, Any]:
    if isinstance(value, dict):
        return dict(value)
    # decoded but not an object (list, number, ...): keep it readable
    return {FALLBACK_FIELD: raw if raw is not None else json.dumps(value, default=str)}


def normalize(envelope: Any) -> Dict[str, Any]:
    try:
        payload = classify(envelope)
        if isinstance(payload, Empty):
            return {}
        if isinstance(payload, Raw):
            try:
                decoded = json.loads(payload.text)
            except ValueError:
                return {FALLBACK_FIELD: payload.text}
            return _as_mapping(decoded, raw=payload.text)
        return _as_mapping(payload.value)
    except Exception:
        log.warning("Could not normalize agent result, treating as empty", exc_info=True)
        return {}


def extract_files(envelope: Any) -> List[ArtifactFile]:
    try:
        files = _get(_get(envelope, "module_outputs"), "artifact_files")
        if not isinstance(files, list):
            return []
        out: List[ArtifactFile] = []
        for item in files:
            if not isinstance(item, dict) or not isinstance(item.get("file_url"), str):
                continue
            out.append(ArtifactFile(
                url=item["file_url"],
                name=item.get("name") if isinstance(item.get("name"), str) else None,
                format_type=item.get("format_type") if isinstance(item.get("format_type"), str) else None,
            ))
        return out
    except Exception:
        log.warning("Could not read artifact files from envelope", exc_info=True)
        return []


def serialize_result(result: Dict[str, Any], budget: int) -> str:
    """Compact JSON of a stage result cut to ``budget`` characters; '' when empty."""
    if not result:
        return ""
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"), default=str)[:budget]
