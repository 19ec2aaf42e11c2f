from .canvas import Canvas, RecordingCanvas
from .screen import Screen

__all__ = ["Canvas", "RecordingCanvas", "Screen"]
