from typing import TYPE_CHECKING, List, Optional

from meshdata.geometry.extent import BBox
from meshdata.utils.logging import MeshStructureError, devlog, mylog

if TYPE_CHECKING:
    from meshdata.dataset.dataset_group import DatasetGroup
    from meshdata.meshes.iterators import MeshFaceIterator, MeshVertexIterator


class Mesh:
    """
    Unstructured mesh with the dataset groups defined on it.

    The topology size (vertex and face counts, maximum vertices per face) is
    fixed when the mesh is created by a driver; dataset values are sized from
    it. The mesh owns its groups, each group keeps a plain back-reference to
    the mesh.
    """

    def __init__(self, driver_name: str,
                 vertices_count: int,
                 faces_count: int,
                 face_vertices_maximum_count: int,
                 extent: BBox,
                 uri: str):
        self._driver_name = driver_name
        self._vertices_count = vertices_count
        self._faces_count = faces_count
        self._face_vertices_maximum_count = face_vertices_maximum_count
        self._extent = extent
        self._uri = uri
        self._crs = ""

        self.dataset_groups: List["DatasetGroup"] = []

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(driver={self._driver_name!r}, vertices={self._vertices_count}, "
                f"faces={self._faces_count}, groups={len(self.dataset_groups)})")

    @property
    def driver_name(self) -> str:
        return self._driver_name

    @property
    def vertices_count(self) -> int:
        return self._vertices_count

    @property
    def faces_count(self) -> int:
        return self._faces_count

    @property
    def face_vertices_maximum_count(self) -> int:
        return self._face_vertices_maximum_count

    @property
    def extent(self) -> BBox:
        return self._extent

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def crs(self) -> str:
        """Coordinate reference string, empty until one of the ``set_source_crs*`` methods is called."""
        return self._crs

    def set_source_crs(self, crs: str):
        self._crs = crs.strip()
        if crs and not self._crs:
            mylog.warning("%s: source crs %r is blank, the mesh has no coordinate reference", self._uri, crs)
        devlog.debug("%s: source crs set to %r", self._uri, self._crs)

    def set_source_crs_from_wkt(self, wkt: str):
        self.set_source_crs(wkt)

    def set_source_crs_from_epsg(self, code: int):
        self.set_source_crs(f"EPSG:{code}")

    def group(self, name: str) -> Optional["DatasetGroup"]:
        """
        Find a dataset group by name.

        Returns the first group whose name matches exactly, or None.
        """
        for grp in self.dataset_groups:
            if grp.name == name:
                return grp
        return None

    def add_dataset_group(self, group: "DatasetGroup"):
        """Append a group created for this mesh."""
        if group.mesh is not self:
            raise MeshStructureError(
                f"Dataset group '{group.name}' belongs to another mesh and cannot be added to {self._uri}")
        self.dataset_groups.append(group)
        devlog.debug("%s: added dataset group %r (%d groups)", self._uri, group.name, len(self.dataset_groups))

    def dataset_groups_count(self) -> int:
        return len(self.dataset_groups)

    def read_vertices(self) -> "MeshVertexIterator":
        raise NotImplementedError(f"{self.__class__.__name__} has no vertex source")

    def read_faces(self) -> "MeshFaceIterator":
        raise NotImplementedError(f"{self.__class__.__name__} has no face source")
