import numpy as np

from meshdata.geometry.extent import BBox
from meshdata.meshes.iterators import MemoryMeshFaceIterator, MemoryMeshVertexIterator
from .mesh import Mesh


def compute_extent(vertices: np.ndarray) -> BBox:
    """Planar extent of an (n, 3) vertex array; a zero box when there are no vertices."""
    if len(vertices) == 0:
        return BBox()
    return BBox(float(vertices[:, 0].min()), float(vertices[:, 0].max()),
                float(vertices[:, 1].min()), float(vertices[:, 1].max()))


class MemoryMesh(Mesh):
    """Mesh whose geometry is held in numpy arrays."""

    def __init__(self, driver_name: str,
                 face_vertices_maximum_count: int,
                 uri: str,
                 vertices: np.ndarray,
                 faces: np.ndarray):
        """
        Args:
            driver_name (str): name of the driver that produced the mesh
            face_vertices_maximum_count (int): maximum number of vertices of a face
            uri (str): source of the mesh
            vertices (np.ndarray): coordinates, shape (nvertices, 3)
            faces (np.ndarray): vertex indices, shape (nfaces, face_vertices_maximum_count),
                padded with -1 for faces with fewer vertices
        """
        vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        faces = np.asarray(faces, dtype=np.int64).reshape(-1, face_vertices_maximum_count)

        if faces.size and faces.max() >= len(vertices):
            raise ValueError(f"faces reference vertex {faces.max()} but the mesh has {len(vertices)} vertices")

        super().__init__(driver_name, len(vertices), len(faces), face_vertices_maximum_count,
                         compute_extent(vertices), uri)

        self.vertices = vertices
        self.faces = faces

    def read_vertices(self):
        return MemoryMeshVertexIterator(self.vertices)

    def read_faces(self):
        return MemoryMeshFaceIterator(self.faces)
