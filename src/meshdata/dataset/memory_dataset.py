import numpy as np

from meshdata.dataset.data_set import Dataset2D
from meshdata.dataset.dataset_group import DatasetGroup


def _copy_range(source: np.ndarray, limit: int, index_start: int, count: int, buffer: np.ndarray) -> int:
    """
    Copy rows ``index_start:index_start+count`` of ``source`` flattened into ``buffer``,
    never reading past row ``limit``. Returns the number of rows copied.
    """
    nvalues = min(limit, len(source))
    if index_start >= nvalues or count <= 0:
        return 0

    copied = min(count, nvalues - index_start)
    chunk = source[index_start:index_start + copied].reshape(-1)
    buffer[:chunk.size] = chunk
    return copied


class MemoryDataset2D(Dataset2D):
    """
    Dataset2D holding its values in numpy arrays.

    The storage is shaped from the group when the dataset is created: one row per
    value, one column for scalar groups and two for vector groups. An active flag
    per face is allocated only when ``has_active_flag`` is requested. Setting
    ``volumes_count`` resizes the storage of volumetric datasets.
    """

    def __init__(self, group: DatasetGroup, has_active_flag: bool = False):
        super().__init__(group)

        self._ncomponents = 1 if group.is_scalar else 2
        self._values = np.full((self.values_count(), self._ncomponents), np.nan, dtype=np.float64)

        self.supports_active_flag = has_active_flag
        if has_active_flag:
            self._active = np.ones(self.mesh.faces_count, dtype=np.int32)
        else:
            self._active = None

    @Dataset2D.volumes_count.setter
    def volumes_count(self, volumes: int):
        Dataset2D.volumes_count.fset(self, volumes)
        # Dataset2D.__init__ sets the count before any storage exists
        if getattr(self, "_values", None) is not None:
            self._resize_values()

    def _resize_values(self):
        nvalues = self.values_count()
        values = np.full((nvalues, self._ncomponents), np.nan, dtype=np.float64)
        kept = min(nvalues, len(self._values))
        values[:kept] = self._values[:kept]
        self._values = values

    def fits_group(self) -> bool:
        return self._values.shape == (self.values_count(), 1 if self.group.is_scalar else 2)

    @property
    def values(self) -> np.ndarray:
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def active(self):
        return self._active

    def _check_index(self, index: int):
        if not 0 <= index < min(self.values_count(), len(self._values)):
            raise IndexError(f"Value index {index} is out of range for a dataset of {self.values_count()} values")

    def set_scalar_value(self, index: int, value: float):
        if not self.group.is_scalar:
            raise ValueError("Scalar values can only be set on scalar dataset groups")
        self._check_index(index)
        self._values[index, 0] = value

    def set_vector_value(self, index: int, x: float, y: float):
        if self.group.is_scalar:
            raise ValueError("Vector values can only be set on vector dataset groups")
        self._check_index(index)
        self._values[index] = (x, y)

    def set_active_flag(self, index: int, active: bool):
        if self._active is None:
            raise ValueError("Dataset was created without active flags")
        self._active[index] = 1 if active else 0

    def scalar_data(self, index_start, count, buffer):
        if not self.group.is_scalar or self._values.shape[1] != 1:
            return 0
        return _copy_range(self._values, self.values_count(), index_start, count, buffer)

    def vector_data(self, index_start, count, buffer):
        if self.group.is_scalar or self._values.shape[1] != 2:
            return 0
        return _copy_range(self._values, self.values_count(), index_start, count, buffer)

    def active_data(self, index_start, count, buffer):
        if self._active is None:
            return 0
        return _copy_range(self._active, self.mesh.faces_count, index_start, count, buffer)
