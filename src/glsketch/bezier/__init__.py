from .overlay import CONTROLS, DebugOverlay
from .session import BezierSession, Phase, format_points

__all__ = ["CONTROLS", "BezierSession", "DebugOverlay", "Phase", "format_points"]
