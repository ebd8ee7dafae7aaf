import numpy as np
import pytest
from core.cached_matrix import CachedMatrix

def test_new_container_has_no_inverse(cached, rotation):
    assert cached.get_matrix() is not rotation
    np.testing.assert_array_equal(cached.get_matrix(), rotation)
    assert cached.get_cached_inverse() is None
    assert not cached.has_cached_inverse()

def test_set_cached_inverse_is_stored_unvalidated(cached):
    bogus = np.zeros((2, 2))
    cached.set_cached_inverse(bogus)
    # No validation: whatever is stored comes back with the same values.
    np.testing.assert_array_equal(cached.get_cached_inverse(), bogus)
    assert cached.has_cached_inverse()

def test_set_matrix_clears_cached_inverse(cached):
    cached.set_cached_inverse(np.eye(2))
    new = np.array([[2.0, 0.0], [0.0, 2.0]])
    cached.set_matrix(new)
    np.testing.assert_array_equal(cached.get_matrix(), new)
    assert cached.get_cached_inverse() is None

def test_set_matrix_clears_even_with_same_matrix(cached, rotation):
    cached.set_cached_inverse(np.eye(2))
    cached.set_matrix(rotation)
    assert cached.get_cached_inverse() is None

def test_set_matrix_accepts_anything():
    # Shape and invertibility are only checked when an inverse is computed.
    c = CachedMatrix([[1, 2, 3]])
    c.set_matrix("not a matrix")
    assert c.get_matrix() == "not a matrix"

def test_reads_do_not_mutate(cached, rotation):
    cached.set_cached_inverse(np.array([[0.5, -0.5], [0.5, 0.5]]))
    matrix, inv = cached.get_matrix(), cached.get_cached_inverse()
    for _ in range(5):
        assert cached.get_matrix() is matrix
        assert cached.get_cached_inverse() is inv
    np.testing.assert_array_equal(rotation, [[1, 1], [-1, 1]])

def test_instances_do_not_share_state(rotation):
    a = CachedMatrix(rotation)
    b = CachedMatrix(rotation)
    a.set_cached_inverse(np.eye(2))
    assert b.get_cached_inverse() is None

def test_repr_reports_cache_state(cached):
    assert repr(cached) == "<CachedMatrix shape=(2, 2), inverse=empty>"
    cached.set_cached_inverse(np.eye(2))
    assert "inverse=cached" in repr(cached)

def test_editing_the_input_array_does_not_reach_the_container(rotation):
    c = CachedMatrix(rotation)
    rotation *= 2
    np.testing.assert_array_equal(c.get_matrix(), [[1, 1], [-1, 1]])

def test_set_matrix_takes_a_copy(cached):
    new = np.array([[2.0, 0.0], [0.0, 2.0]])
    cached.set_matrix(new)
    new[0, 0] = 5.0
    assert cached.get_matrix()[0, 0] == 2.0

def test_stored_arrays_are_read_only(cached):
    cached.set_cached_inverse(np.eye(2))
    assert not cached.get_matrix().flags.writeable
    assert not cached.get_cached_inverse().flags.writeable
    with pytest.raises(ValueError):
        cached.get_cached_inverse()[0, 0] = 99.0
    with pytest.raises(ValueError):
        cached.get_matrix()[0, 0] = 99.0

def test_set_cached_inverse_takes_a_copy(cached):
    inv = np.eye(2)
    cached.set_cached_inverse(inv)
    inv[0, 0] = 99.0
    np.testing.assert_array_equal(cached.get_cached_inverse(), np.eye(2))

def test_list_matrix_is_copied_both_ways():
    rows = [[1, 0], [0, 1]]
    c = CachedMatrix(rows)
    rows[0][0] = 7
    assert c.get_matrix() == [[1, 0], [0, 1]]
    c.get_matrix()[0][0] = 7
    assert c.get_matrix() == [[1, 0], [0, 1]]
