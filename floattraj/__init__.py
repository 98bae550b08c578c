"""
floattraj package containing tools for plotting the trajectories
of BGC-Argo floats on maps, colored by float or by the Data Assembly
Center responsible for each float.

"""

__all__ = ['FloatPath',
           'FloatGroup',
           'make_floatgroup',
           'FloatIndex',
           'Mapping',
           'PlotSettings',
           'MapLimits',
           'get_lon_lat_lims',
           'map_limits',
           'sample_colors',
           'assign_colors',
           'get_renderer',
           'plot_trajectories']

__version__ = '0.1.0'

from .floatpath import FloatPath

from .floatgroup import FloatGroup, make_floatgroup

from .agency import FloatIndex

from .settings import Mapping, PlotSettings

from .limits import MapLimits, get_lon_lat_lims, map_limits

from .mapmaker import sample_colors, assign_colors

from .renderers import get_renderer

from .trajplot import plot_trajectories
