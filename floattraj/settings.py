import logging
from enum import Enum

import matplotlib as mpl
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


class Mapping(Enum):
    """Available map rendering backends."""

    NATIVE = 'native'
    TOOLBOX = 'toolbox'
    PLAIN = 'plain'


_mapping_aliases = {'native': Mapping.NATIVE,
                    'cartopy': Mapping.NATIVE,
                    'toolbox': Mapping.TOOLBOX,
                    'm_map': Mapping.TOOLBOX,
                    'basemap': Mapping.TOOLBOX,
                    'plain': Mapping.PLAIN}

# Land and water fill of the native backend's base map
BASEMAP_STYLES = {'grayland': {'water': 'white',
                               'land': '0.75'},
                  'light': {'water': 'white',
                            'land': '0.95'},
                  'medium': {'water': '0.625',
                             'land': '0.775'},
                  'dark': {'water': '0.3',
                           'land': '0.75'}}


class PlotSettings(object):
    """
    Class for holding display settings of trajectory plots.

    """

    def __init__(self, colormap=None, mapping=Mapping.PLAIN,
                 basemap='grayland', markersize=10, figsize=(10, 6), dpi=150,
                 single_color='r', legend_loc='center left'):
        """
        Initialize ``PlotSettings`` instance.

        Parameters
        ----------
        colormap : string or ``Colormap``
            Default ``None``, matplotlib's default colormap
            (rcParams['image.cmap']).  Palette used for 'multiple' and
            'dac' coloring.
        mapping : ``Mapping`` or string
            Default ``Mapping.PLAIN``.  The rendering backend.
                'native' : cartopy geographic axes
                'toolbox' (or 'm_map') : Basemap projection
                'plain' : ordinary 2-D scatter plot
        basemap : string
            Default 'grayland'.  Base map style of the native backend.
            ['grayland'|'light'|'medium'|'dark']
        markersize : int or float
            Default 10.  Marker area in points^2.
        figsize : tuple of floats
            Default (10, 6).  Figure size in inches.
        dpi : int
            Default 150.  Resolution of saved images.
        single_color : string or tuple
            Default 'r'.  Color of a lone float in 'multiple' mode.
        legend_loc : string
            Default 'center left'.  Legend anchor; the legend is placed
            outside the axes on the right.

        """
        self.colormap = colormap
        self._set_mapping(mapping)
        self._set_basemap(basemap)

        self.markersize = markersize
        self.figsize = figsize
        self.dpi = dpi
        self.single_color = single_color
        self.legend_loc = legend_loc

    def _set_mapping(self, mapping):
        """
        Set the rendering backend.  Defaults to ``Mapping.PLAIN``.

        """
        if isinstance(mapping, Mapping):
            self.mapping = mapping
        elif str(mapping).lower() in _mapping_aliases:
            self.mapping = _mapping_aliases[str(mapping).lower()]
        else:
            self.mapping = Mapping.PLAIN
            logger.warning('Mapping %r not recognized, defaulting to `plain`.',
                           mapping)

    def _set_basemap(self, basemap):
        """
        Set the native base map style.  Defaults to 'grayland'.

        """
        if basemap in BASEMAP_STYLES:
            self.basemap = basemap
        else:
            self.basemap = 'grayland'
            logger.warning('Basemap %r not recognized, defaulting to '
                           '`grayland`.', basemap)

    @property
    def basemap_colors(self):
        return BASEMAP_STYLES[self.basemap]

    def get_cmap(self):
        """
        Resolve the colormap.

        Returns
        -------
        cmap : ``matplotlib.colors.Colormap``

        """
        if self.colormap is None:
            return plt.get_cmap(mpl.rcParams['image.cmap'])
        return plt.get_cmap(self.colormap)
