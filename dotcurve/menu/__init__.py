from .bar import ControlBar

__all__ = [
    "ControlBar",
]
