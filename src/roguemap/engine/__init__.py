from .world import World
from .session import Session, SessionEvent

__all__ = ["World", "Session", "SessionEvent"]
