import numpy as np
import pytest
from meshdata import BBox, DataLocation, DatasetGroup, DatasetGroupLockedError, MemoryDataset2D, Mesh


@pytest.fixture
def common_mesh():
    return Mesh("TEST", 100, 40, 4, BBox(), "test.2dm")


@pytest.fixture
def scalar_faces_group(common_mesh):
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "depth")
    grp.data_location = DataLocation.DataOnFaces2D
    common_mesh.add_dataset_group(grp)
    return grp


@pytest.fixture
def vector_vertices_group(common_mesh):
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "velocity")
    grp.is_scalar = False
    common_mesh.add_dataset_group(grp)
    return grp


def test_storage_shape(scalar_faces_group, vector_vertices_group):
    scalar = MemoryDataset2D(scalar_faces_group)
    vector = MemoryDataset2D(vector_vertices_group)

    assert scalar.values.shape == (40, 1)
    assert vector.values.shape == (100, 2)
    assert np.all(np.isnan(scalar.values))
    assert scalar.active is None
    assert not scalar.supports_active_flag


def test_values_are_read_only(scalar_faces_group):
    ds = MemoryDataset2D(scalar_faces_group)
    with pytest.raises(ValueError):
        ds.values[0, 0] = 1.0


def test_scalar_data(scalar_faces_group):
    ds = MemoryDataset2D(scalar_faces_group)
    for i in range(ds.values_count()):
        ds.set_scalar_value(i, 0.5 * i)

    buffer = np.zeros(10)
    assert ds.scalar_data(0, 10, buffer) == 10
    assert np.allclose(buffer, 0.5 * np.arange(10))

    assert ds.scalar_data(35, 10, buffer) == 5
    assert np.allclose(buffer[:5], 0.5 * np.arange(35, 40))

    assert ds.scalar_data(40, 10, buffer) == 0
    assert ds.scalar_data(100, 10, buffer) == 0
    assert ds.vector_data(0, 10, np.zeros(20)) == 0


def test_read_in_chunks(scalar_faces_group):
    """Consumers read until a short result"""
    ds = MemoryDataset2D(scalar_faces_group)
    for i in range(ds.values_count()):
        ds.set_scalar_value(i, float(i))

    values = []
    buffer = np.zeros(16)
    index = 0
    while True:
        nread = ds.scalar_data(index, 16, buffer)
        values.extend(buffer[:nread])
        index += nread
        if nread < 16:
            break

    assert np.allclose(values, np.arange(40))


def test_vector_data(vector_vertices_group):
    ds = MemoryDataset2D(vector_vertices_group)
    ds.set_vector_value(0, 1.0, 2.0)
    ds.set_vector_value(1, -1.0, 0.5)

    buffer = np.zeros(4)
    assert ds.vector_data(0, 2, buffer) == 2
    assert np.allclose(buffer, [1.0, 2.0, -1.0, 0.5])

    assert ds.vector_data(99, 5, np.zeros(10)) == 1
    assert ds.scalar_data(0, 2, np.zeros(2)) == 0


def test_set_value_of_wrong_kind(scalar_faces_group, vector_vertices_group):
    with pytest.raises(ValueError):
        MemoryDataset2D(scalar_faces_group).set_vector_value(0, 1.0, 1.0)
    with pytest.raises(ValueError):
        MemoryDataset2D(vector_vertices_group).set_scalar_value(0, 1.0)


def test_active_data(scalar_faces_group):
    ds = MemoryDataset2D(scalar_faces_group, has_active_flag=True)
    assert ds.supports_active_flag
    assert ds.active.shape == (40,)

    ds.set_active_flag(2, False)
    buffer = np.zeros(5, dtype=np.int32)
    assert ds.active_data(0, 5, buffer) == 5
    assert list(buffer) == [1, 1, 0, 1, 1]

    assert ds.active_data(40, 5, buffer) == 0


def test_active_data_without_flags(scalar_faces_group):
    ds = MemoryDataset2D(scalar_faces_group)
    assert ds.active_data(0, 5, np.zeros(5, dtype=np.int32)) == 0
    with pytest.raises(ValueError):
        ds.set_active_flag(0, True)


def test_volumes_location_has_no_values(common_mesh):
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "layers")
    grp.data_location = DataLocation.DataOnVolumes3D
    ds = MemoryDataset2D(grp)
    assert ds.values_count() == 0
    assert ds.scalar_data(0, 5, np.zeros(5)) == 0
    assert ds.scalar_volumes_data(0, 5, np.zeros(5)) == 0


def test_populate_group(scalar_faces_group, common_mesh):
    """Drivers fill a group with time steps while in edit mode"""
    scalar_faces_group.start_editing()
    for step in range(3):
        ds = MemoryDataset2D(scalar_faces_group)
        ds.time = step * 0.5
        ds.set_scalar_value(0, float(step))
        ds.is_valid = True
        scalar_faces_group.add_dataset(ds)
    scalar_faces_group.stop_editing()

    grp = common_mesh.group("depth")
    assert grp.dataset_count() == 3
    assert [ds.time for ds in grp.datasets] == [0.0, 0.5, 1.0]
    assert all(ds.is_valid for ds in grp.datasets)
    assert all(ds.values_count() == 40 for ds in grp.datasets)


def test_location_changed_before_adding(common_mesh):
    """Storage built for vertices cannot be attached once the group moved to faces"""
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "depth")
    ds = MemoryDataset2D(grp)
    for i in range(ds.values_count()):
        ds.set_scalar_value(i, float(i))

    grp.data_location = DataLocation.DataOnFaces2D
    assert ds.values_count() == 40
    assert not ds.fits_group()

    buffer = np.zeros(10)
    assert ds.scalar_data(50, 10, buffer) == 0
    assert ds.scalar_data(35, 10, buffer) == 5

    with pytest.raises(DatasetGroupLockedError):
        grp.add_dataset(ds)
    assert grp.dataset_count() == 0


def test_shape_changed_before_adding(common_mesh):
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "velocity")
    ds = MemoryDataset2D(grp)
    grp.is_scalar = False

    assert ds.scalar_data(0, 5, np.zeros(5)) == 0
    assert ds.vector_data(0, 5, np.zeros(10)) == 0
    with pytest.raises(DatasetGroupLockedError):
        grp.add_dataset(ds)


def test_volumes_resize_storage(common_mesh):
    grp = DatasetGroup("TEST", common_mesh, "test.dat", "layers")
    grp.data_location = DataLocation.DataOnVolumes3D
    ds = MemoryDataset2D(grp)

    ds.volumes_count = 17
    assert ds.values_count() == 17
    assert ds.values.shape == (17, 1)
    assert ds.fits_group()

    ds.set_scalar_value(0, 1.0)
    ds.set_scalar_value(16, 2.0)
    buffer = np.zeros(20)
    assert ds.scalar_data(0, 20, buffer) == 17
    assert buffer[0] == 1.0
    assert buffer[16] == 2.0

    ds.volumes_count = 5
    assert ds.values.shape == (5, 1)
    assert ds.values[0, 0] == 1.0
    assert ds.scalar_data(0, 20, buffer) == 5

    grp.add_dataset(ds)
    assert grp.dataset_count() == 1


def test_set_value_out_of_range(scalar_faces_group):
    ds = MemoryDataset2D(scalar_faces_group)
    with pytest.raises(IndexError):
        ds.set_scalar_value(40, 1.0)
    with pytest.raises(IndexError):
        ds.set_scalar_value(-1, 1.0)
