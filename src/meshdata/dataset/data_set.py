import abc

import numpy as np

from meshdata.dataset.dataset_group import DataLocation, DatasetGroup
from meshdata.dataset.statistics import Statistics
from meshdata.meshes.mesh import Mesh
from meshdata.utils.logging import MeshStructureError


class Dataset(abc.ABC):
    """
    Abstract base dataset: the values of a group at one time step.

    All data access methods share one calling convention: ``(index_start, count, buffer)``,
    with ``buffer`` a numpy array large enough for ``count`` elements. They return the
    number of elements written, which is at most ``count`` and 0 when ``index_start`` is
    past the end of the data. A short result means there is no more data.
    """

    def __init__(self, group: DatasetGroup):
        """
        Args:
            group (DatasetGroup): the group the dataset belongs to
        """
        if group is None:
            raise MeshStructureError("A dataset must be created with a parent dataset group")

        self._group = group
        self._time = 0.0
        self._is_valid = False
        self._statistics = Statistics()
        self._volumes_count = 0
        self._supports_active_flag = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(time={self._time}, values={self.values_count()}, valid={self._is_valid})"

    @property
    def group(self) -> DatasetGroup:
        return self._group

    @property
    def mesh(self) -> Mesh:
        return self._group.mesh

    @property
    def driver_name(self) -> str:
        return self._group.driver_name

    def values_count(self) -> int:
        """
        Number of values in the dataset, derived from the group's data location:
        mesh vertices, mesh faces or the dataset's own volumes.
        """
        location = self._group.data_location

        if location == DataLocation.DataOnVertices2D:
            return self.mesh.vertices_count
        if location == DataLocation.DataOnFaces2D:
            return self.mesh.faces_count
        if location == DataLocation.DataOnVolumes3D:
            return self.volumes_count
        return 0

    def fits_group(self) -> bool:
        """
        Whether storage allocated by the dataset still matches the shape of its group.

        Drivers reading values lazily have no storage to check.
        """
        return True

    @property
    def time(self) -> float:
        return self._time

    @time.setter
    def time(self, time: float):
        self._time = float(time)

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @is_valid.setter
    def is_valid(self, is_valid: bool):
        self._is_valid = bool(is_valid)

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    @statistics.setter
    def statistics(self, statistics: Statistics):
        self._statistics = statistics

    @property
    def volumes_count(self) -> int:
        return self._volumes_count

    @volumes_count.setter
    def volumes_count(self, volumes: int):
        self._volumes_count = int(volumes)

    @property
    def supports_active_flag(self) -> bool:
        return self._supports_active_flag

    @supports_active_flag.setter
    def supports_active_flag(self, value: bool):
        self._supports_active_flag = bool(value)

    @abc.abstractmethod
    def scalar_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """One double per value."""

    @abc.abstractmethod
    def vector_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """Two doubles (x, y) per value."""

    @abc.abstractmethod
    def active_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """One int per face, 1 for active faces."""

    @abc.abstractmethod
    def vertical_level_count_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """Number of vertical levels of each face."""

    @abc.abstractmethod
    def vertical_level_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """Elevations of the vertical levels."""

    @abc.abstractmethod
    def face_to_volume_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """Index of the first volume of each face."""

    @abc.abstractmethod
    def scalar_volumes_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """One double per volume."""

    @abc.abstractmethod
    def vector_volumes_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        """Two doubles per volume."""


class Dataset2D(Dataset):
    """
    Dataset defined on the 2D mesh, vertices or faces.

    The layered accessors report no data; stacked 3D drivers override them.
    """

    def __init__(self, group: DatasetGroup):
        super().__init__(group)
        self.volumes_count = 0

    def vertical_level_count_data(self, index_start, count, buffer):
        return 0

    def vertical_level_data(self, index_start, count, buffer):
        return 0

    def face_to_volume_data(self, index_start, count, buffer):
        return 0

    def scalar_volumes_data(self, index_start, count, buffer):
        return 0

    def vector_volumes_data(self, index_start, count, buffer):
        return 0

    def active_volumes_data(self, index_start: int, count: int, buffer: np.ndarray) -> int:
        return 0


class Dataset3D(Dataset):
    """
    Dataset defined on volumes.

    Face based access reports no data; drivers implement the volumetric accessors.
    """

    def scalar_data(self, index_start, count, buffer):
        return 0

    def vector_data(self, index_start, count, buffer):
        return 0

    def active_data(self, index_start, count, buffer):
        return 0
