"""Minimal tracing primitives.

Events are emitted as JSON lines on stderr. Stdout belongs to the MCP stdio
channel and must never carry log output.

In production, you'd likely export traces to an OTEL collector.
"""

from __future__ import annotations

import json
import sys
import time
import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Span:
    name: str
    trace_id: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_ns: int = field(default_factory=time.time_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        self.end_ns = time.time_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0


def new_trace_id() -> str:
    return uuid.uuid4().hex


def log_event(event: str, *, trace_id: str, span: Span | None = None, **fields: Any) -> None:
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id, **fields}
    if span is not None:
        payload['span'] = {
            'name': span.name,
            'span_id': span.span_id,
            'duration_ms': span.duration_ms,
            'attributes': span.attributes,
        }
    print(json.dumps(payload, ensure_ascii=False, default=str), file=sys.stderr, flush=True)


def end_http_span(span: Span, *, status: int | None = None, error: str | None = None) -> None:
    """Close a Coolify request span and emit ``http.request`` or ``http.error``.

    The status (or the failure message) is recorded on the span so one event
    carries method, path, outcome and timing.
    """
    span.end()
    if error is not None:
        span.attributes['error'] = error
        log_event('http.error', trace_id=span.trace_id, span=span)
        return
    span.attributes['status'] = status
    span.attributes['success'] = status is not None and 200 <= status < 300
    log_event('http.request', trace_id=span.trace_id, span=span)
