import numpy as np
import geopandas as gp
from shapely.geometry import Point, LineString


class FloatPath(object):
    """
    Class for holding the position fixes of a single float.

    """

    def __init__(self, floatid, lats, lons, alt_lons=None):
        """
        Initialize GeoDataFrame and path.

        Parameters
        ----------
        floatid : int or string
            The float identifier (WMO number).
        lats : (M) array-like of floats
            Latitudes of the position fixes in decimal degrees.
        lons : (M) array-like of floats
            Longitudes of the position fixes, -180 to 180 degrees.
        alt_lons : (M) array-like of floats
            Default ``None``.  Longitudes of the position fixes in the
            0 to 360 convention.

        """
        lats = np.ravel(np.asarray(lats, dtype=float))
        lons = np.ravel(np.asarray(lons, dtype=float))

        if lats.size == 0:
            raise ValueError('Float {0} has no position fixes'.format(floatid))
        if lats.size != lons.size:
            raise ValueError('Float {0}: {1} latitudes but {2} longitudes'
                             .format(floatid, lats.size, lons.size))

        self.floatid = floatid

        pts = [Point(x, y) for x, y in zip(lons, lats)]

        self.data = gp.GeoDataFrame({'LATITUDE': lats, 'LONGITUDE': lons},
                                    geometry=pts)

        if len(pts) > 1:
            self.path = LineString(pts)
        else:
            self.path = pts[0]

        if alt_lons is not None:
            alt_lons = np.ravel(np.asarray(alt_lons, dtype=float))
            if alt_lons.size != lons.size:
                raise ValueError('Float {0}: ALT_LON does not match LONGITUDE'
                                 .format(floatid))
            self.data['ALT_LON'] = alt_lons

    def __hash__(self):
        """Magic hash method."""
        return hash(str(self.floatid))

    def __eq__(self, other):
        """Magic eq method."""
        if isinstance(other, self.__class__):
            return str(self.floatid) == str(other.floatid)
        return NotImplemented

    def __len__(self):
        return len(self.data)

    @property
    def has_alt_lon(self):
        """``True`` if the 0..360 longitudes are present."""
        return 'ALT_LON' in self.data.columns

    @property
    def lats(self):
        return self.data['LATITUDE'].values

    def get_lons(self, use_alt_lon=False):
        """
        Longitudes in the requested convention.

        Parameters
        ----------
        use_alt_lon : Boolean
            Default False.  Return the 0..360 longitudes (``ALT_LON``)
            instead of the -180..180 longitudes.

        """
        if use_alt_lon:
            return self.data['ALT_LON'].values
        return self.data['LONGITUDE'].values

    def set_alt_lon(self):
        """Derive ``ALT_LON`` (0..360) from ``LONGITUDE``."""
        self.data['ALT_LON'] = np.mod(self.data['LONGITUDE'].values, 360.0)

    def first_fix(self, use_alt_lon=False):
        """
        Latitude and longitude of the first position fix.

        Returns
        -------
        lat, lon : floats

        """
        return self.lats[0], self.get_lons(use_alt_lon)[0]
