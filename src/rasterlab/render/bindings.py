"""Contract between scenes and the graphics host.

The core never talks to a graphics API directly. It flattens points and
segments into vertex/index buffers and hands them to a RenderHost, which
returns an opaque GpuMeshHandle per mesh. The host owns the buffers until
the handle is freed.

Key components:
- GpuMeshHandle: Value identifying an uploaded mesh
- point_mesh_buffers / segment_mesh_buffers: Buffer layout
- RenderHost: Protocol any graphics backend implements
- HeadlessRenderHost: In-memory host for batch runs and tests
- SceneRenderer: Uploads a scene, draws it per frame, frees it on teardown
"""

import itertools
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Protocol, runtime_checkable

from rasterlab.core.scene import Scene
from rasterlab.core.vec3 import Mat4, translate
from rasterlab.domain import Point, Segment
from rasterlab.exceptions import GraphicsInitError, RasterLabError
from rasterlab.utils import SceneLogger, configure_logging


class PrimitiveMode(str, Enum):
    """Primitive type a mesh is drawn with."""

    POINTS = "points"
    LINES = "lines"


@dataclass(frozen=True, slots=True)
class GpuMeshHandle:
    """Buffers of one uploaded mesh.

    Attributes:
        mesh_id: Host-wide mesh identifier
        vertex_array: Vertex array object id
        vertex_buffer: Vertex buffer object id
        index_buffer: Index buffer object id
        index_count: Number of indices to draw
        mode: Primitive type
    """

    mesh_id: int
    vertex_array: int
    vertex_buffer: int
    index_buffer: int
    index_count: int
    mode: PrimitiveMode


def point_mesh_buffers(points: Iterable[Point]) -> tuple[list[float], list[int]]:
    """Lay out points as N x 3 floats with indices 0..N-1."""
    vertices: list[float] = []
    for p in points:
        vertices.extend((float(p.x), float(p.y), float(p.z)))
    return vertices, list(range(len(vertices) // 3))


def segment_mesh_buffers(segments: Iterable[Segment]) -> tuple[list[float], list[int]]:
    """Lay out segments as origin/tip vertex pairs with index pairs (2i, 2i + 1)."""
    vertices: list[float] = []
    for segment in segments:
        for p in (segment.origin, segment.tip):
            vertices.extend((float(p.x), float(p.y), float(p.z)))
    return vertices, list(range(len(vertices) // 3))


@runtime_checkable
class RenderHost(Protocol):
    """What the core needs from a graphics backend."""

    def upload_point_mesh(self, points: Sequence[Point]) -> GpuMeshHandle: ...

    def upload_segment_mesh(self, segments: Sequence[Segment]) -> GpuMeshHandle: ...

    def render_handle(self, handle: GpuMeshHandle) -> None: ...

    def free_handle(self, handle: GpuMeshHandle) -> None: ...


@dataclass(frozen=True)
class _MeshBuffers:
    vertices: tuple[float, ...]
    indices: tuple[int, ...]
    mode: PrimitiveMode


class HeadlessRenderHost:
    """RenderHost that keeps buffers in memory and counts draw calls.

    Object ids are handed out sequentially starting at 1, the way a GL
    driver names fresh buffers.
    """

    def __init__(self) -> None:
        self._object_ids = itertools.count(1)
        self._mesh_ids = itertools.count(1)
        self._meshes: dict[int, _MeshBuffers] = {}
        self.draw_calls: Counter[int] = Counter()

    def _upload(
        self, vertices: list[float], indices: list[int], mode: PrimitiveMode
    ) -> GpuMeshHandle:
        if not indices:
            raise GraphicsInitError(f"refusing to upload an empty {mode.value} mesh")
        mesh_id = next(self._mesh_ids)
        self._meshes[mesh_id] = _MeshBuffers(tuple(vertices), tuple(indices), mode)
        return GpuMeshHandle(
            mesh_id=mesh_id,
            vertex_array=next(self._object_ids),
            vertex_buffer=next(self._object_ids),
            index_buffer=next(self._object_ids),
            index_count=len(indices),
            mode=mode,
        )

    def _require(self, handle: GpuMeshHandle) -> _MeshBuffers:
        try:
            return self._meshes[handle.mesh_id]
        except KeyError:
            raise GraphicsInitError(f"unknown mesh handle {handle.mesh_id}") from None

    def upload_point_mesh(self, points: Sequence[Point]) -> GpuMeshHandle:
        vertices, indices = point_mesh_buffers(points)
        return self._upload(vertices, indices, PrimitiveMode.POINTS)

    def upload_segment_mesh(self, segments: Sequence[Segment]) -> GpuMeshHandle:
        vertices, indices = segment_mesh_buffers(segments)
        return self._upload(vertices, indices, PrimitiveMode.LINES)

    def render_handle(self, handle: GpuMeshHandle) -> None:
        self._require(handle)
        self.draw_calls[handle.mesh_id] += 1

    def free_handle(self, handle: GpuMeshHandle) -> None:
        self._require(handle)
        del self._meshes[handle.mesh_id]

    def vertices(self, handle: GpuMeshHandle) -> tuple[float, ...]:
        """Vertex buffer contents of a live mesh."""
        return self._require(handle).vertices

    def indices(self, handle: GpuMeshHandle) -> tuple[int, ...]:
        """Index buffer contents of a live mesh."""
        return self._require(handle).indices

    @property
    def live_meshes(self) -> int:
        """Number of meshes uploaded and not yet freed."""
        return len(self._meshes)


class SceneRenderer:
    """Draws a scene through a RenderHost.

    Uploads the axes, the polyline and the pixels once, issues one draw call
    per mesh per frame, and frees every mesh on close. Usable as a context
    manager.

    Example:
        with SceneRenderer(HeadlessRenderHost()) as renderer:
            renderer.upload(scene)
            renderer.run(frames=1)
    """

    def __init__(self, host: RenderHost, scene_logger: SceneLogger | None = None) -> None:
        self.host = host
        self.scene_logger = (
            scene_logger if scene_logger is not None else SceneLogger(configure_logging())
        )
        self._handles: list[GpuMeshHandle] = []
        self._frames = 0

    @property
    def handles(self) -> tuple[GpuMeshHandle, ...]:
        return tuple(self._handles)

    def model_matrix(self) -> Mat4:
        """Model transform of the scene: a translation by the origin."""
        return translate((0.0, 0.0, 0.0))

    def _track(self, handle: GpuMeshHandle) -> None:
        self._handles.append(handle)
        self.scene_logger.log_mesh_upload(handle.mesh_id, handle.mode.value, handle.index_count)

    def upload(self, scene: Scene) -> tuple[GpuMeshHandle, ...]:
        """Upload every mesh of the scene.

        Raises:
            GraphicsInitError: If the host fails to create a mesh
        """
        try:
            self._track(self.host.upload_segment_mesh(scene.axes))
            if scene.segments:
                self._track(self.host.upload_segment_mesh(scene.segments))
            self._track(self.host.upload_point_mesh(scene.points))
        except RasterLabError:
            raise
        except Exception as e:
            raise GraphicsInitError(str(e)) from e
        return self.handles

    def render_frame(self) -> None:
        """Issue one draw call per uploaded mesh."""
        for handle in self._handles:
            self.host.render_handle(handle)
        self._frames += 1
        self.scene_logger.log_frame(self._frames, len(self._handles))

    def run(self, frames: int) -> int:
        """Render a fixed number of frames and return the total drawn so far."""
        for _ in range(frames):
            self.render_frame()
        return self._frames

    def close(self) -> None:
        """Free every uploaded mesh."""
        while self._handles:
            self.host.free_handle(self._handles.pop())

    def __enter__(self) -> "SceneRenderer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
