"""Log Context Management.

Context variables for binding a run ID and extra fields
(e.g. activity and record counts) to every log entry.
"""

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


_run_id_var: ContextVar[str] = ContextVar("run_id", default="")
_extra_context_var: ContextVar[dict] = ContextVar("extra_context", default={})


def generate_run_id() -> str:
    """Generate a unique run ID using UUID4."""
    return str(uuid.uuid4())


def get_context_dict() -> dict[str, Any]:
    """Get all context variables as a dictionary for log binding."""
    ctx = {}
    run_id = _run_id_var.get()
    if run_id:
        ctx["run_id"] = run_id
    extra = _extra_context_var.get()
    if extra:
        ctx.update(extra)
    return ctx


@dataclass
class LogContext:
    """Context manager binding a run ID and extra fields to log entries.

    Restores the enclosing context on exit.

    Example:
        with LogContext() as ctx:
            ctx.bind(activities=120)
            logger.info("summarizing")  # includes run_id, activities
    """

    run_id: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    _tokens: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.run_id:
            self.run_id = generate_run_id()

    def __enter__(self) -> "LogContext":
        self._tokens = [
            (_run_id_var, _run_id_var.set(self.run_id)),
            (_extra_context_var, _extra_context_var.set(self.extra.copy())),
        ]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens.clear()

    def bind(self, **kwargs: Any) -> None:
        """Add extra key-value pairs to the context."""
        current = _extra_context_var.get()
        _extra_context_var.set({**current, **kwargs})
        self.extra.update(kwargs)
