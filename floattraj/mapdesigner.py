import logging

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.basemap import Basemap

logger = logging.getLogger(__name__)


class MapDesign(object):
    """
    Class for holding Basemap design elements

    """

    def __init__(self, latlim, lonlim, projection=None, wide_span=15,
                 land_color='0.7', resolution='c', area_threshold=10000,
                 zborder=14, latlon_fs=10):
        """
        Initialize ``MapDesign`` instance.

        Parameters
        ----------
        latlim : list of floats
            [south, north] latitude limits of the map view.
        lonlim : list of floats
            [west, east] longitude limits of the map view.
        projection : string
            Default ``None``, chosen from the latitude span: 'robin' if the
            span exceeds ``wide_span`` degrees, else 'lcc'.
                'robin' : Robinson
                'lcc' : Lambert Conformal Conic
        wide_span : int or float
            Default 15.  Latitude span (degrees) above which the map is
            treated as a wide area.
        land_color : string
            Default '0.7'.  Fill color of land patches.
        resolution : char
            Default 'c'.  ['c'|'l'|'i'|'h'|'f'].
            Crude, low, intermediate, high, full. The relative resolution of
            map boundaries.
        area_threshold : int
            Default 10000.  The minimum surface area a feature must have to
            be drawn on the map.
        zborder : int
            Default 14. The zorder of coastal outlines
        latlon_fs : int or float
            Default 10.  Font size of latitude, longitude labels.

        """
        self.latlim = latlim
        self.lonlim = lonlim
        self.land_color = land_color
        self.resolution = resolution
        self.area_threshold = area_threshold
        self.zborder = zborder
        self.latlon_fs = latlon_fs
        self.view = None

        if projection is None:
            if latlim[1] - latlim[0] > wide_span:
                projection = 'robin'
            else:
                projection = 'lcc'
        self._set_projection(projection)

    def _set_projection(self, projection):
        """
        Set the projection.  Defaults to 'robin'.

        """
        available_proj = {'robin': 'Robinson',
                          'lcc': 'Lambert Conformal Conic'}

        if projection in available_proj:
            self.projection = projection
        else:
            self.projection = 'robin'
            logger.warning('Projection %r not recognized, defaulting to '
                           '`robin`.', projection)

    def _grid_spacing(self, span):
        for step in (1, 2, 5, 10, 20, 30, 60):
            if span / step <= 6:
                return step
        return 90

    def make_basemap(self, ax=None, figsize=(10, 10)):
        """
        Takes the MapDesign attributes plus a figure size and creates a map
        on which data can be plotted.

        Parameters
        ----------
        ax : axes instance
            Default None, figure and axis will be created.  Otherwise,
            basemap will be created on given axis.
        figsize : tuple of ints
            Default (10, 10). The size of the figure in inches.  Only
            used if ``ax`` is ``None``.

        Returns
        -------
        basemap : ``Basemap`` instance
            A map ready for data plotting.  Can access axis and figure
            via ``basemap.ax`` and ``basemap.ax.get_figure()``, respectively.

        """
        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=figsize)

        lon_0 = (self.lonlim[0] + self.lonlim[1]) / 2.0
        lat_0 = (self.latlim[0] + self.latlim[1]) / 2.0

        self.view = None

        if self.projection == 'lcc':
            # A cone with lat_1 == -lat_2 is undefined
            if abs(lat_0) < 1:
                lat_0 = 1.0
            basemap = Basemap(llcrnrlon=self.lonlim[0],
                              llcrnrlat=self.latlim[0],
                              urcrnrlon=self.lonlim[1],
                              urcrnrlat=self.latlim[1],
                              projection='lcc',
                              lat_1=lat_0,
                              lat_2=lat_0,
                              lon_0=lon_0,
                              area_thresh=self.area_threshold,
                              resolution=self.resolution,
                              ax=ax)
        else:
            # Robinson is global only; clip the view to the limits
            basemap = Basemap(projection='robin',
                              lon_0=lon_0,
                              area_thresh=self.area_threshold,
                              resolution=self.resolution,
                              ax=ax)
            edge_lons = np.linspace(self.lonlim[0], self.lonlim[1], 50)
            edge_lats = np.linspace(self.latlim[0], self.latlim[1], 50)
            grid_lons, grid_lats = np.meshgrid(edge_lons, edge_lats)
            x, y = basemap(grid_lons, grid_lats)
            self.view = (np.min(x), np.max(x), np.min(y), np.max(y))

        basemap.drawcoastlines(zorder=self.zborder)
        basemap.fillcontinents(color=self.land_color, zorder=12,
                               lake_color='white')

        # Draw and label lines of latitude and longitude
        latstep = self._grid_spacing(self.latlim[1] - self.latlim[0])
        lonstep = self._grid_spacing(self.lonlim[1] - self.lonlim[0])

        basemap.drawparallels(np.arange(-90, 91, latstep),
                              labels=[1, 0, 0, 0], zorder=11,
                              fontsize=self.latlon_fs)
        basemap.drawmeridians(np.arange(-180, 361, lonstep),
                              labels=[0, 0, 0, 1], zorder=11,
                              fontsize=self.latlon_fs)

        basemap.drawmapboundary(linewidth=2, zorder=16)

        return basemap

    def set_view(self, basemap):
        """
        Clip a wide-area map to the latitude and longitude limits.

        ``Basemap`` plotting methods reset the axis limits to the full map,
        so call this after all data have been drawn.

        """
        if self.view is not None:
            basemap.ax.set_xlim(self.view[0], self.view[1])
            basemap.ax.set_ylim(self.view[2], self.view[3])
