import matplotlib.pyplot as plt
import pytest
from numpy.testing import assert_allclose

from floattraj import (FloatIndex, PlotSettings, make_floatgroup,
                       sample_colors, assign_colors)


def test_sample_colors_endpoints():
    cmap = plt.get_cmap('viridis')
    colors = sample_colors(cmap, 3)

    assert colors.shape == (3, 4)
    assert_allclose(colors[0], cmap(0))
    assert_allclose(colors[1], cmap(128))
    assert_allclose(colors[-1], cmap(cmap.N - 1))


def test_multiple_single_float_fallback():
    group = make_floatgroup({1: {'LATITUDE': [0.0], 'LONGITUDE': [0.0]}})
    scheme = assign_colors(group, 'multiple', PlotSettings())

    assert scheme.colors == ['r']
    assert not scheme.by_dac


def test_multiple_distinct_colors(two_dac_data):
    group = make_floatgroup(two_dac_data)
    scheme = assign_colors(group, 'multiple', PlotSettings(colormap='jet'))

    assert len(scheme.colors) == 3
    assert_allclose(scheme.colors[0], plt.get_cmap('jet')(0))
    assert tuple(scheme.colors[0]) != tuple(scheme.colors[2])


def test_fixed_color(two_dac_data):
    group = make_floatgroup(two_dac_data)
    scheme = assign_colors(group, 'k', PlotSettings())

    assert scheme.colors == ['k', 'k', 'k']
    assert scheme.legend == []


def test_dac_colors(two_dac_data, two_dac_index):
    group = make_floatgroup(two_dac_data)
    scheme = assign_colors(group, 'dac', PlotSettings(),
                           float_index=two_dac_index)

    assert scheme.by_dac
    assert [e.label for e in scheme.legend] == ['aoml', 'coriolis']
    assert [e.floatid for e in scheme.legend] == [1900722, 6901585]
    assert_allclose(scheme.colors[0], scheme.colors[1])
    assert_allclose(scheme.colors[2], scheme.legend[1].color)


def test_dac_without_index(two_dac_data):
    group = make_floatgroup(two_dac_data)

    with pytest.raises(ValueError):
        assign_colors(group, 'dac', PlotSettings())


class ReversedIndex(FloatIndex):

    def dacs_for(self, float_ids):
        return FloatIndex.dacs_for(self, float_ids)[::-1]


def test_dac_order_from_float_index(two_dac_data, two_dac_index):
    group = make_floatgroup(two_dac_data)
    index = ReversedIndex.from_mapping(two_dac_index)
    scheme = assign_colors(group, 'dac', PlotSettings(), float_index=index)

    assert [e.label for e in scheme.legend] == ['coriolis', 'aoml']
    assert_allclose(scheme.colors[2], scheme.legend[0].color)
