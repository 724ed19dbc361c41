"""
Cursors over mesh geometry.

Drivers hand out subclasses of :py:class:`MeshVertexIterator` and
:py:class:`MeshFaceIterator` from ``Mesh.read_vertices`` / ``Mesh.read_faces``.
Consumers call ``next`` with buffers of their choice until it returns 0.

The ``Memory*`` cursors walk numpy arrays and back :py:class:`~meshdata.meshes.memory_mesh.MemoryMesh`.
"""
import abc

import numpy as np


class MeshVertexIterator(abc.ABC):

    @abc.abstractmethod
    def next(self, vertex_count: int, coordinates: np.ndarray) -> int:
        """
        Copy up to ``vertex_count`` vertices into ``coordinates``.

        ``coordinates`` is flat, x/y/z per vertex. Returns the number of
        vertices written; 0 once the cursor is exhausted.
        """


class MeshFaceIterator(abc.ABC):

    @abc.abstractmethod
    def next(self, face_offsets_buffer_len: int, face_offsets_buffer: np.ndarray,
             vertex_indices_buffer_len: int, vertex_indices_buffer: np.ndarray) -> int:
        """
        Copy as many whole faces as fit into the two buffers.

        ``vertex_indices_buffer`` receives the vertex indices of consecutive faces,
        ``face_offsets_buffer[i]`` the end position of face ``i`` in it. A face is
        never split across calls. Returns the number of faces written; 0 once the
        cursor is exhausted.
        """


class MemoryMeshVertexIterator(MeshVertexIterator):

    def __init__(self, vertices: np.ndarray):
        self.vertices = vertices
        self.position = 0

    def next(self, vertex_count, coordinates):
        if coordinates.size < 3 * vertex_count:
            raise ValueError(f"coordinates buffer holds {coordinates.size} values, {3 * vertex_count} needed")

        count = max(0, min(vertex_count, len(self.vertices) - self.position))
        if count == 0:
            return 0

        chunk = self.vertices[self.position:self.position + count, :3]
        coordinates[:3 * count] = chunk.reshape(-1)
        self.position += count
        return count


class MemoryMeshFaceIterator(MeshFaceIterator):

    def __init__(self, faces: np.ndarray):
        # faces are padded with -1 up to the maximum number of vertices per face
        self.faces = faces
        self.position = 0

    def next(self, face_offsets_buffer_len, face_offsets_buffer,
             vertex_indices_buffer_len, vertex_indices_buffer):
        if face_offsets_buffer.size < face_offsets_buffer_len:
            raise ValueError("face offsets buffer is smaller than face_offsets_buffer_len")
        if vertex_indices_buffer.size < vertex_indices_buffer_len:
            raise ValueError("vertex indices buffer is smaller than vertex_indices_buffer_len")

        face_index = 0
        vertex_index = 0

        while face_index < face_offsets_buffer_len and self.position < len(self.faces):
            face = self.faces[self.position]
            face = face[face >= 0]
            if vertex_index + len(face) > vertex_indices_buffer_len:
                break

            vertex_indices_buffer[vertex_index:vertex_index + len(face)] = face
            vertex_index += len(face)
            face_offsets_buffer[face_index] = vertex_index

            face_index += 1
            self.position += 1

        return face_index
