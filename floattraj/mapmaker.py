from collections import namedtuple

import numpy as np

from .agency import as_float_index

ColorScheme = namedtuple('ColorScheme', ['colors', 'legend', 'by_dac'])

LegendEntry = namedtuple('LegendEntry', ['label', 'color', 'floatid'])


def sample_colors(cmap, ncolors):
    """
    Sample ``ncolors`` evenly spaced entries of a colormap.

    Parameters
    ----------
    cmap : ``matplotlib.colors.Colormap``
        The palette
    ncolors : int
        The number of colors to pick

    Returns
    -------
    colors : (ncolors, 4) ndarray of floats
        RGBA rows of the colormap lookup table at
        ``round(linspace(0, cmap.N - 1, ncolors))``.

    """
    indx = np.round(np.linspace(0, cmap.N - 1, ncolors)).astype(int)

    return cmap(indx)


def assign_colors(floatgroup, color, settings, float_index=None):
    """
    Work out the color of each float.

    Parameters
    ----------
    floatgroup : ``FloatGroup``
    color : string or tuple
        'multiple' (a different palette color for each float), 'dac'
        (color by the DAC responsible for each float), or any
        ``matplotlib`` color, used for all floats.
    settings : ``PlotSettings``
    float_index : ``FloatIndex`` or dict
        Default ``None``.  Required for 'dac'.

    Returns
    -------
    scheme : ``ColorScheme``
        ``colors`` holds one color per float, in group order.  For 'dac',
        ``legend`` holds one ``LegendEntry`` per DAC, pointing at the
        first float of that DAC.

    """
    nfloats = len(floatgroup)

    if isinstance(color, str) and color == 'dac':
        if float_index is None:
            raise ValueError("Coloring by 'dac' needs a float index")
        float_index = as_float_index(float_index)

        float_dacs = [float_index.dac(fid) for fid in floatgroup.floatids]
        dacs = float_index.dacs_for(floatgroup.floatids)
        cmap = sample_colors(settings.get_cmap(), len(dacs))

        colors = [cmap[dacs.index(d)] for d in float_dacs]
        legend = [LegendEntry(d, cmap[i],
                              floatgroup.floatids[float_dacs.index(d)])
                  for i, d in enumerate(dacs)]

        return ColorScheme(colors, legend, True)

    if isinstance(color, str) and color == 'multiple':
        if nfloats == 1:
            colors = [settings.single_color]
        else:
            colors = list(sample_colors(settings.get_cmap(), nfloats))
    else:
        colors = [color] * nfloats

    return ColorScheme(colors, [], False)


def float_scatter(ax, lons, lats, color, size, zorder=19, edgecolor='none',
                  **kwargs):
    """
    Scatter-plot the position fixes of one float.

    Parameters
    ----------
    ax : ``Axes`` or ``Basemap`` instance
        Where to plot.  ``Basemap`` instances need ``latlon=True`` in
        ``kwargs``, cartopy ``GeoAxes`` need ``transform``.
    lons : 1D ndarray of floats
    lats : 1D ndarray of floats
    color : string, tuple
        Any ``matplotlib``-accepted color
    size : int or float
        Marker area in points^2
    zorder : int
        Default 19.  Data zorder.
    **kwargs
        Passed to ``scatter()``

    Returns
    -------
    pc : ``matplotlib PathCollection`` instance

    """
    return ax.scatter(lons, lats, s=size, color=color, zorder=zorder,
                      edgecolor=edgecolor, **kwargs)


def make_legend(ax, settings, handles=None, labels=None):
    """
    Place a legend outside the right edge of ``ax``.

    Parameters
    ----------
    ax : ``Axes`` instance
    settings : ``PlotSettings``
    handles : list of artists
        Default ``None``.  If ``None``, labelled artists of ``ax`` are used.
    labels : list of strings
        Default ``None``.

    Returns
    -------
    legend : ``matplotlib Legend`` instance

    """
    if handles is None:
        handles, labels = ax.get_legend_handles_labels()

    return ax.legend(handles, labels, loc=settings.legend_loc,
                     bbox_to_anchor=(1.02, 0.5), borderaxespad=0.)
