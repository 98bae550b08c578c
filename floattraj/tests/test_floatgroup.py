import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose, assert_raises

from floattraj import FloatPath, FloatGroup, make_floatgroup


def test_matlab_shaped_arrays():
    data = {'1900722': {'LATITUDE': np.array([[1.0, 2.0, 3.0]]),
                        'LONGITUDE': np.array([[4.0, 5.0, 6.0]])}}
    group = make_floatgroup(data)

    assert group.floatcount == 1
    assert_allclose(group[0].lats, [1.0, 2.0, 3.0])
    assert_allclose(group[0].path.xy[0], [4.0, 5.0, 6.0])


def test_from_dataframe():
    frame = pd.DataFrame({'WMOID': [11, 11, 22],
                          'LATITUDE': [1.0, 2.0, 3.0],
                          'LONGITUDE': [4.0, 5.0, 6.0]})
    group = make_floatgroup(frame)

    assert group.floatids == [11, 22]
    assert len(group.get(22)) == 1


def test_bogus_container():
    assert_raises(TypeError, make_floatgroup, [1, 2, 3])


def test_mismatched_coordinates():
    assert_raises(ValueError, FloatPath, 1, [1.0, 2.0], [3.0])
    assert_raises(ValueError, FloatPath, 1, [], [])


def test_subset_order_and_id_types(two_dac_data):
    group = make_floatgroup(two_dac_data)
    sub = group.subset(['6901585', 1900722])

    assert sub.floatids == [6901585, 1900722]


def test_unknown_float():
    group = make_floatgroup({1: {'LATITUDE': [0.0], 'LONGITUDE': [0.0]}})

    with pytest.raises(KeyError):
        group.get(2)


def test_pop_and_append(two_dac_data):
    group = make_floatgroup(two_dac_data)
    popped = group.pop(floatid=5904859)

    assert popped.floatid == 5904859
    assert group.floatcount == 2

    group.append(popped)
    assert group.floatids[-1] == 5904859
    assert isinstance(group[1:], FloatGroup)
