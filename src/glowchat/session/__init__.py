from .controller import CycleOutcome, SessionController, SessionState
from .surface import ChatSurface

__all__ = [
    "ChatSurface",
    "CycleOutcome",
    "SessionController",
    "SessionState",
]
