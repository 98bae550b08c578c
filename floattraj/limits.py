import logging
from collections import namedtuple

import numpy as np

from .floatgroup import all_coordinates

logger = logging.getLogger(__name__)

MapLimits = namedtuple('MapLimits', ['latlim', 'lonlim', 'use_alt_lon'])

# Distance from the dateline (degrees) within which 0..360 is preferred
DATELINE_BAND = 30.0


def _near_dateline(lons):
    lons = lons[np.isfinite(lons)]
    return lons.size > 0 and np.all(np.abs(lons) >= 180.0 - DATELINE_BAND)


def get_lon_lat_lims(floatgroup):
    """
    Get the extreme longitudes and latitudes of a group of floats.

    If some floats carry 0..360 longitudes, ``ALT_LON`` is added to the
    others.  If none does and all position fixes lie within
    ``DATELINE_BAND`` degrees of the dateline, ``ALT_LON`` is added to
    every float so that the trajectories are not split.

    Parameters
    ----------
    floatgroup : ``FloatGroup``

    Returns
    -------
    lon_lim : list of floats
        [minimum, maximum] longitude, in the convention of the first float.
    lat_lim : list of floats
        [minimum, maximum] latitude.
    floatgroup : ``FloatGroup``
        The same group, possibly with ``ALT_LON`` added.

    """
    if any(f.has_alt_lon for f in floatgroup):
        for f in floatgroup:
            if not f.has_alt_lon:
                f.set_alt_lon()
    else:
        _, lons = all_coordinates(floatgroup)
        if _near_dateline(lons):
            logger.debug('All fixes near the dateline, adding ALT_LON')
            for f in floatgroup:
                f.set_alt_lon()

    use_alt_lon = floatgroup[0].has_alt_lon
    lats, lons = all_coordinates(floatgroup, use_alt_lon)

    lon_lim = [np.nanmin(lons), np.nanmax(lons)]
    lat_lim = [np.nanmin(lats), np.nanmax(lats)]

    return lon_lim, lat_lim, floatgroup


def map_limits(floatgroup, pad=5.0):
    """
    Padded and clamped map limits for a group of floats.

    Parameters
    ----------
    floatgroup : ``FloatGroup``
    pad : float
        Default 5.0.  Degrees added on each side of the extreme positions.

    Returns
    -------
    limits : ``MapLimits``
        ``latlim`` clamped to [-90, 90]; ``lonlim`` clamped to [0, 360]
        if 0..360 longitudes are used (``use_alt_lon``), else to
        [-180, 180].

    """
    lon_lim, lat_lim, floatgroup = get_lon_lat_lims(floatgroup)

    latlim = np.clip([lat_lim[0] - pad, lat_lim[1] + pad], -90.0, 90.0)

    use_alt_lon = floatgroup[0].has_alt_lon
    if use_alt_lon:
        lon_range = (0.0, 360.0)
    else:
        lon_range = (-180.0, 180.0)
    lonlim = np.clip([lon_lim[0] - pad, lon_lim[1] + pad], *lon_range)

    return MapLimits(list(latlim), list(lonlim), use_alt_lon)
