import numpy as np
from numpy.testing import assert_allclose

from floattraj import make_floatgroup, get_lon_lat_lims, map_limits


def test_single_float_latlim():
    group = make_floatgroup({1: {'LATITUDE': [30.0], 'LONGITUDE': [-40.0]}})
    limits = map_limits(group)

    assert_allclose(limits.latlim, [25.0, 35.0])
    assert_allclose(limits.lonlim, [-45.0, -35.0])
    assert not limits.use_alt_lon


def test_latlim_clamped_at_poles():
    group = make_floatgroup({1: {'LATITUDE': [-88.0, 87.0],
                                 'LONGITUDE': [0.0, 1.0]}})
    limits = map_limits(group)

    assert_allclose(limits.latlim, [-90.0, 90.0])


def test_lonlim_clamped_without_alt_lon():
    group = make_floatgroup({1: {'LATITUDE': [0.0, 1.0],
                                 'LONGITUDE': [-178.0, 120.0]}})
    limits = map_limits(group)

    assert_allclose(limits.lonlim, [-180.0, 125.0])


def test_dateline_with_alt_lon_uses_0_360():
    data = {1: {'LATITUDE': [0.0, 1.0], 'LONGITUDE': [175.0, -175.0],
                'ALT_LON': [175.0, 185.0]},
            2: {'LATITUDE': [2.0, 3.0], 'LONGITUDE': [-170.0, 178.0],
                'ALT_LON': [190.0, 178.0]}}
    limits = map_limits(make_floatgroup(data))

    assert limits.use_alt_lon
    assert_allclose(limits.lonlim, [170.0, 195.0])


def test_alt_lon_added_near_dateline():
    group = make_floatgroup({1: {'LATITUDE': [0.0, 1.0],
                                 'LONGITUDE': [170.0, -170.0]}})
    lon_lim, lat_lim, group = get_lon_lat_lims(group)

    assert group[0].has_alt_lon
    assert_allclose(group[0].get_lons(True), [170.0, 190.0])
    assert_allclose(lon_lim, [170.0, 190.0])
    assert_allclose(lat_lim, [0.0, 1.0])


def test_alt_lon_not_added_away_from_dateline():
    group = make_floatgroup({1: {'LATITUDE': [0.0, 1.0],
                                 'LONGITUDE': [170.0, 100.0]}})
    lon_lim, _, group = get_lon_lat_lims(group)

    assert not group[0].has_alt_lon
    assert_allclose(lon_lim, [100.0, 170.0])


def test_nan_positions_ignored():
    group = make_floatgroup({1: {'LATITUDE': [np.nan, 10.0, 12.0],
                                 'LONGITUDE': [np.nan, 20.0, 22.0]}})
    lon_lim, lat_lim, _ = get_lon_lat_lims(group)

    assert_allclose(lon_lim, [20.0, 22.0])
    assert_allclose(lat_lim, [10.0, 12.0])


def test_alt_lon_completed_when_first_float_has_it():
    data = {1: {'LATITUDE': [0.0, 1.0], 'LONGITUDE': [175.0, -175.0],
                'ALT_LON': [175.0, 185.0]},
            2: {'LATITUDE': [2.0, 3.0], 'LONGITUDE': [-170.0, -172.0]}}
    group = make_floatgroup(data)
    limits = map_limits(group)

    assert group[1].has_alt_lon
    assert limits.use_alt_lon
    assert_allclose(limits.lonlim, [170.0, 195.0])


def test_alt_lon_completed_when_later_float_has_it():
    data = {2: {'LATITUDE': [2.0, 3.0], 'LONGITUDE': [-170.0, 178.0]},
            1: {'LATITUDE': [0.0, 1.0], 'LONGITUDE': [175.0, -175.0],
                'ALT_LON': [175.0, 185.0]}}
    limits = map_limits(make_floatgroup(data))

    assert limits.use_alt_lon
    assert_allclose(limits.latlim, [-5.0, 8.0])
    assert_allclose(limits.lonlim, [170.0, 195.0])
