"""Render bindings for rasterlab.

The graphics layer is an external collaborator. This package defines the
narrow contract between it and the core (mesh handles, buffer layout and
the RenderHost protocol) along with an in-memory host used for headless
runs and tests.
"""

from rasterlab.render.bindings import (
    GpuMeshHandle,
    HeadlessRenderHost,
    PrimitiveMode,
    RenderHost,
    SceneRenderer,
    point_mesh_buffers,
    segment_mesh_buffers,
)

__all__ = [
    "GpuMeshHandle",
    "HeadlessRenderHost",
    "PrimitiveMode",
    "RenderHost",
    "SceneRenderer",
    "point_mesh_buffers",
    "segment_mesh_buffers",
]
