# trajectories/diagnostics.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    INVALID_DISTANCE = "invalid_distance"
    NUMERIC_DOMAIN_ERROR = "numeric_domain_error"
    CONSTRAINT_VIOLATION = "constraint_violation"


@dataclass
class Diagnostic:
    """
    A condition detected while building a profile.

    Diagnostics never abort the computation: the profile is always left in a
    complete, queryable state and the record only describes what went wrong.

    Attributes:
        kind (DiagnosticKind): Category of the condition.
        message (str): Human-readable description.
        state (dict): Input parameters and derived values needed to
            reproduce the condition.
    """
    kind: DiagnosticKind
    message: str
    state: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return dict(kind=self.kind.value, message=self.message, **self.state)

    def __str__(self) -> str:
        details = " ".join(f"{k}={v:g}" if isinstance(v, float) else f"{k}={v}"
                           for k, v in self.state.items())
        return f"[{self.kind.value}] {self.message} {details}".rstrip()


DiagnosticCallback = Callable[[Diagnostic], None]


def report_diagnostic(
    kind: DiagnosticKind,
    message: str,
    on_diagnostic: Optional[DiagnosticCallback] = None,
    **state: Any,
) -> Diagnostic:
    """
    Build a diagnostic, log it and forward it to the caller's callback.

    Args:
        kind: Category of the condition.
        message: Short description.
        on_diagnostic: Optional sink receiving the record.
        **state: Values dumped alongside the message.

    Returns:
        Diagnostic: The record that was reported.
    """
    diagnostic = Diagnostic(kind=kind, message=message, state=dict(state))
    logger.warning("%s", diagnostic)
    if on_diagnostic is not None:
        on_diagnostic(diagnostic)
    return diagnostic
