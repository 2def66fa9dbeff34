from __future__ import annotations


class UnknownDrawCommandError(TypeError):
    """Raised when a drawing surface receives a command type it cannot execute."""
