import uuid
from contextvars import ContextVar

TRACE_ID_CTX_VAR: ContextVar[str] = ContextVar("trace_id", default="")


def new_trace_id() -> str:
    """Generate a trace id and bind it to the current context.

    The request-handling layer may set TRACE_ID_CTX_VAR itself; log records
    and error envelopes read whatever value is bound.
    """
    trace_id = str(uuid.uuid4())
    TRACE_ID_CTX_VAR.set(trace_id)
    return trace_id


def current_trace_id() -> str:
    return TRACE_ID_CTX_VAR.get()
