"""
Dataset groups: the time series of datasets attached to a mesh.

A group fixes where its values live (:py:class:`DataLocation`) and whether they
are scalars or 2D vectors. Both are frozen as soon as the group owns a dataset,
since datasets size their storage from them when they are created.
"""
import enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from meshdata.dataset.statistics import Statistics
from meshdata.utils.logging import DatasetGroupLockedError, MeshStructureError, devlog

if TYPE_CHECKING:
    from meshdata.dataset.data_set import Dataset
    from meshdata.meshes.mesh import Mesh


class DataLocation(enum.Enum):
    DataInvalidLocation = 0
    DataOnVertices2D = 1
    DataOnFaces2D = 2
    DataOnVolumes3D = 3


class DatasetGroup:
    """
    Named, ordered collection of datasets sharing location and value shape.

    Group level metadata is kept as ordered ``(key, value)`` pairs; the group
    name is the entry under ``"name"``.
    """

    def __init__(self, driver_name: str, mesh: "Mesh", uri: str, name: Optional[str] = None):
        if mesh is None:
            raise MeshStructureError("A dataset group must be created with a parent mesh")

        self._driver_name = driver_name
        self._mesh = mesh
        self._uri = uri

        self._metadata: List[Tuple[str, str]] = []
        self._statistics = Statistics()
        self._reference_time = ""
        self._data_location = DataLocation.DataOnVertices2D
        self._is_scalar = True
        self._in_edit_mode = False

        self.datasets: List["Dataset"] = []

        if name is not None:
            self.name = name

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self.name!r}, location={self._data_location.name}, "
                f"scalar={self._is_scalar}, datasets={len(self.datasets)})")

    @property
    def driver_name(self) -> str:
        return self._driver_name

    @property
    def mesh(self) -> "Mesh":
        return self._mesh

    @property
    def uri(self) -> str:
        return self._uri

    # metadata

    @property
    def metadata(self) -> Tuple[Tuple[str, str], ...]:
        """The metadata pairs in insertion order."""
        return tuple(self._metadata)

    def get_metadata(self, key: str) -> str:
        """Value stored under ``key``, or an empty string if the key is not set."""
        for k, v in self._metadata:
            if k == key:
                return v
        return ""

    def set_metadata(self, key: str, val: str):
        """Overwrite the value stored under ``key``, or append a new entry."""
        for i, (k, _) in enumerate(self._metadata):
            if k == key:
                self._metadata[i] = (key, val)
                return
        self._metadata.append((key, val))

    def metadata_count(self) -> int:
        return len(self._metadata)

    @property
    def name(self) -> str:
        return self.get_metadata("name")

    @name.setter
    def name(self, name: str):
        self.set_metadata("name", name)

    # cached values

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    @statistics.setter
    def statistics(self, statistics: Statistics):
        self._statistics = statistics

    @property
    def reference_time(self) -> str:
        return self._reference_time

    @reference_time.setter
    def reference_time(self, reference_time: str):
        self._reference_time = reference_time

    # shape, frozen once datasets exist

    def _check_unlocked(self, prop: str):
        if self.datasets:
            devlog.debug("%s: rejected change of %s with %d datasets", self.name, prop, len(self.datasets))
            raise DatasetGroupLockedError(
                f"Cannot change {prop} of dataset group '{self.name}': it already has {len(self.datasets)} datasets")

    @property
    def data_location(self) -> DataLocation:
        return self._data_location

    @data_location.setter
    def data_location(self, data_location: DataLocation):
        self._check_unlocked("data_location")
        self._data_location = DataLocation(data_location)

    @property
    def is_scalar(self) -> bool:
        return self._is_scalar

    @is_scalar.setter
    def is_scalar(self, is_scalar: bool):
        self._check_unlocked("is_scalar")
        self._is_scalar = bool(is_scalar)

    # edit mode

    def is_in_edit_mode(self) -> bool:
        return self._in_edit_mode

    def start_editing(self):
        self._in_edit_mode = True

    def stop_editing(self):
        self._in_edit_mode = False

    # datasets

    def add_dataset(self, dataset: "Dataset"):
        """Append a dataset created for this group."""
        if dataset.group is not self:
            raise MeshStructureError(f"Dataset belongs to another group and cannot be added to '{self.name}'")
        if not dataset.fits_group():
            raise DatasetGroupLockedError(
                f"Dataset storage no longer matches the location or value shape of group '{self.name}'")
        self.datasets.append(dataset)
        devlog.debug("%s: added dataset at time %s (%d datasets)", self.name, dataset.time, len(self.datasets))

    def dataset_count(self) -> int:
        return len(self.datasets)
