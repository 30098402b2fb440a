"""
Matplotlib canvas widgets for FOV visualization.
"""
from ui.canvases.fov_trace import FovTraceCanvas, TraceBuffer

__all__ = ['FovTraceCanvas', 'TraceBuffer']
