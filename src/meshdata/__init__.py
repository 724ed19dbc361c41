"""
Meshdata: an in-memory model of unstructured meshes and the simulation results defined on them.

Drivers build a :py:class:`Mesh`, attach :py:class:`DatasetGroup` objects to it and fill
each group with :py:class:`Dataset` time steps; consumers walk the same tree to read
values per mesh element.
"""

__version__ = "0.1.0"
__license__ = "GPL-3.0"

# Version information tuple
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Expose main functionality at package level
from .utils.config import meshdata_params
from .utils.logging import MeshDataError, MeshStructureError, DatasetGroupLockedError
from .geometry.extent import BBox
from .dataset.statistics import Statistics
from .meshes.mesh import Mesh
from .meshes.memory_mesh import MemoryMesh
from .meshes.iterators import MeshVertexIterator, MeshFaceIterator
from .dataset.dataset_group import DataLocation, DatasetGroup
from .dataset.data_set import Dataset, Dataset2D, Dataset3D
from .dataset.memory_dataset import MemoryDataset2D

# Define what should be available in "from meshdata import *"
__all__ = [
    'meshdata_params',
    'MeshDataError',
    'MeshStructureError',
    'DatasetGroupLockedError',
    'BBox',
    'Statistics',
    'Mesh',
    'MemoryMesh',
    'MeshVertexIterator',
    'MeshFaceIterator',
    'DataLocation',
    'DatasetGroup',
    'Dataset',
    'Dataset2D',
    'Dataset3D',
    'MemoryDataset2D',
]
