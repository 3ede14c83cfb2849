from .closed_loop_runner import ClosedLoopRunner

__all__ = ["ClosedLoopRunner"]
