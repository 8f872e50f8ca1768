"""
Replay module.

Turns a step-log prefix into what a renderer draws:
- NodeOverlay: visited flag and displayed distance per node
- ReplayFrame: node overlays plus highlighted edges at one step index
- project: build the frame for a step index
- iter_frames: every frame of a run, in order
"""

from pathtrace.replay.projector import NodeOverlay, ReplayFrame, iter_frames, project

__all__ = [
    "NodeOverlay",
    "ReplayFrame",
    "project",
    "iter_frames",
]
