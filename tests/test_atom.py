import numpy as np
import pytest

from coldatoms.atom import Atom, AtomCloud, format_vector


def test_deflag_new_atoms_removes_flag():
    cloud = AtomCloud([Atom()])
    atom = next(iter(cloud))
    assert atom.newly_created
    assert cloud.deflag_new_atoms() == 1
    assert not atom.newly_created
    assert cloud.deflag_new_atoms() == 0


def test_destroy_marked_removes_only_marked():
    keep = Atom()
    doomed = Atom(to_be_destroyed=True)
    cloud = AtomCloud([keep, doomed])
    removed = cloud.destroy_marked()
    assert removed == [doomed]
    assert list(cloud) == [keep]
    assert len(cloud) == 1


def test_clear_force_sets_zero():
    atom = Atom(force=[1.0, -2.0, 3.0])
    atom.clear_force()
    assert np.array_equal(atom.force, np.zeros(3))


def test_cloud_clear_forces():
    cloud = AtomCloud()
    cloud.add(Atom(force=[1.0, 1.0, 1.0]))
    cloud.add(Atom(force=[0.0, 5.0, 0.0]))
    cloud.clear_forces()
    assert all(np.array_equal(a.force, np.zeros(3)) for a in cloud)


def test_add_returns_atom_and_grows_cloud():
    cloud = AtomCloud()
    atom = Atom(mass=87.0)
    assert cloud.add(atom) is atom
    assert len(cloud) == 1
    assert list(cloud)[0].mass == 87.0


def test_default_atom_is_at_rest_at_origin():
    atom = Atom()
    assert np.array_equal(atom.position, np.zeros(3))
    assert np.array_equal(atom.velocity, np.zeros(3))
    assert atom.old_force is None


def test_bad_vector_shape_raises():
    with pytest.raises(ValueError):
        Atom(position=[1.0, 2.0])


@pytest.mark.parametrize(
    "vector, expected",
    [
        ([0.0, 0.0, 0.0], "(0.0,0.0,0.0)"),
        ([1.5, -2.0, 3.0], "(1.5,-2.0,3.0)"),
        ([1e-5, 0.1, 1e20], "(1e-5,0.1,1e20)"),
        ([float("nan"), float("inf"), -0.0], "(NaN,inf,-0.0)"),
    ],
)
def test_format_vector(vector, expected):
    assert format_vector(vector) == expected