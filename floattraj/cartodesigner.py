import numpy as np
import matplotlib.pyplot as plt
import cartopy.crs as ccrs
import cartopy.feature as cfeature
from cartopy.mpl.ticker import LongitudeFormatter, LatitudeFormatter


class CartoDesign(object):

    """Class for holding map design elements of cartopy maps."""

    def __init__(self, latlim, lonlim, use_alt_lon=False,
                 colors=None,
                 latlon_spacing=(10, 20), draw_labels=True, alpha_gl=0.3,
                 feature_scale='110m'):
        """
        Initialize ``CartoDesign`` instance.

        Parameters
        ----------
        latlim : list of floats
            [south, north] latitude limits.
        lonlim : list of floats
            [west, east] longitude limits, -180..180 or 0..360
            (``use_alt_lon``).
        use_alt_lon : Boolean
            Default False.  If True, the map is centered on the dateline.
        colors : dict
            Default None, {'water': 'white', 'land': '0.75'}.  Base map
            fill.
        latlon_spacing : tuple of ints or floats
            Default (10, 20).  Degrees between gridlines of
            (latitude, longitude).
        draw_labels : Boolean
            Default True.  Label gridlines around the edge.
        alpha_gl : int or float
            Default 0.3.  Transparency of gridlines.
        feature_scale : string
            Default '110m'.  Natural Earth resolution of the land polygons.

        """
        self.latlim = latlim
        self.lonlim = lonlim
        self.use_alt_lon = use_alt_lon
        if colors is None:
            colors = {'water': 'white', 'land': '0.75'}
        self.colors = colors
        self.latlon_spacing = latlon_spacing
        self.draw_labels = draw_labels
        self.alpha_gl = alpha_gl
        self.feature_scale = feature_scale

        # Position data are always plain lat/lon
        self.data_crs = ccrs.PlateCarree()

        if use_alt_lon:
            self.projection = ccrs.PlateCarree(central_longitude=180)
        else:
            self.projection = ccrs.PlateCarree()

    def make_cartopy(self, fig=None, figsize=(10, 10)):
        """
        Create ``GeoAxes`` on which float positions can be plotted.

        Parameters
        ----------
        fig : ``Figure`` instance
            Default None, a figure will be created.
        figsize : tuple of ints
            Default (10, 10).  Only used if ``fig`` is ``None``.

        Returns
        -------
        ax : cartopy ``GeoAxes`` instance

        """
        if fig is None:
            fig = plt.figure(figsize=figsize)

        ax = fig.add_subplot(1, 1, 1, projection=self.projection)

        if self.lonlim[1] - self.lonlim[0] >= 360:
            ax.set_global()
            ax.set_ylim(self.latlim)
        else:
            extent = [self.lonlim[0], self.lonlim[1],
                      self.latlim[0], self.latlim[1]]
            ax.set_extent(extent, crs=self.data_crs)

        ax.set_facecolor(self.colors['water'])
        ax.add_feature(cfeature.LAND.with_scale(self.feature_scale),
                       facecolor=self.colors['land'], edgecolor='none',
                       zorder=3)
        ax.add_feature(cfeature.COASTLINE.with_scale(self.feature_scale),
                       linewidth=0.5, zorder=4)

        lat_space, lon_space = self.latlon_spacing
        gl = ax.gridlines(crs=self.data_crs, draw_labels=self.draw_labels,
                          xlocs=np.arange(-180, 181, lon_space),
                          ylocs=np.arange(-90, 91, lat_space),
                          alpha=self.alpha_gl, linestyle='--')
        gl.top_labels = False
        gl.right_labels = False
        gl.xformatter = LongitudeFormatter()
        gl.yformatter = LatitudeFormatter()

        return ax
