import logging
import warnings

import matplotlib.pyplot as plt

from .floatgroup import make_floatgroup
from .limits import map_limits
from .mapmaker import assign_colors
from .renderers import get_renderer
from .settings import PlotSettings

logger = logging.getLogger(__name__)

USAGE = 'Usage: plot_trajectories(data, color, title1, fn_png, float_ids)'

_NOTSET = object()


def plot_trajectories(data=_NOTSET, color=_NOTSET, title1=_NOTSET,
                      fn_png=_NOTSET, float_ids=_NOTSET, settings=None,
                      float_index=None):
    """
    Plot the trajectories of one or more floats.

    Parameters
    ----------
    data : dict, ``pandas.DataFrame`` or ``FloatGroup``
        Float positions; see ``make_floatgroup()``.  Must hold
        'LATITUDE' and 'LONGITUDE' for every float.
    color : string or tuple
        'multiple' (different colors for different floats), 'dac' (colored
        by the DAC responsible for each float), or any ``matplotlib`` color
        ('r', 'k', 'b', 'g' etc.; all trajectories in the same color).
    title1 : string
        Title of the plot.
    fn_png : string
        If not empty, a PNG image of the plot is written to this path.
    float_ids : list of ints or strings
        Identifiers of the floats to be plotted, keys of ``data``.
    settings : ``PlotSettings``
        Default ``None``, default settings.  Colormap and mapping backend.
    float_index : ``FloatIndex`` or dict
        Default ``None``.  Float to DAC lookup, required if
        ``color`` is 'dac'.

    Returns
    -------
    fig : ``Figure`` instance
        ``None`` if any of the required arguments is missing; a warning
        is issued instead.

    """
    if any(arg is _NOTSET for arg in (data, color, title1, fn_png,
                                      float_ids)):
        warnings.warn(USAGE, stacklevel=2)
        return None

    if settings is None:
        settings = PlotSettings()

    floatgroup = make_floatgroup(data).subset(float_ids)

    limits = map_limits(floatgroup)
    logger.debug('Map limits: lat %s, lon %s (0..360: %s)', limits.latlim,
                 limits.lonlim, limits.use_alt_lon)

    scheme = assign_colors(floatgroup, color, settings,
                           float_index=float_index)

    renderer = get_renderer(settings.mapping)

    fig = plt.figure(figsize=settings.figsize)
    ax = renderer.render(floatgroup, limits, scheme, settings, fig)
    ax.set_title(title1)

    if fn_png:
        fig.savefig(fn_png, format='png', dpi=settings.dpi,
                    bbox_inches='tight')
        logger.info('Wrote %s', fn_png)

    return fig
