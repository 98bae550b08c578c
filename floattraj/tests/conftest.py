import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def two_dac_data():
    return {1900722: {'LATITUDE': [10.0, 11.0, 12.5],
                      'LONGITUDE': [-30.0, -29.5, -28.0]},
            5904859: {'LATITUDE': [-20.0, -21.0],
                      'LONGITUDE': [40.0, 41.0]},
            6901585: {'LATITUDE': [0.5, 1.0],
                      'LONGITUDE': [-10.0, -11.0]}}


@pytest.fixture
def two_dac_index():
    return {1900722: 'aoml', 5904859: 'aoml', 6901585: 'coriolis'}
