import numpy as np
import pandas as pd

from .floatpath import FloatPath


class FloatGroup(object):
    """
    Class for processing and plotting multiple ``FloatPath`` instances.

    """

    def __init__(self, floats):
        """
        Initialize ``FloatGroup`` object.

        Parameters
        ----------
        floats : list of ``FloatPath`` instances
            ``FloatPath`` instances that belong in the group.

        """
        self.floats = list(floats)
        self.floatcount = len(self.floats)
        self.floatids = [f.floatid for f in self.floats]

    def __len__(self):
        return self.floatcount

    def __iter__(self):
        return iter(self.floats)

    def __getitem__(self, index):
        """
        Get ``FloatPath`` or ``FloatGroup``.

        Parameters
        ----------
        index : int or slice

        Returns
        -------
        ``FloatPath`` or ``FloatGroup`` depending if indexed or sliced.

        """
        newthing = self.floats[index]

        if isinstance(newthing, list):
            newthing = FloatGroup(newthing)

        return newthing

    def _position(self, floatid):
        keys = [str(f) for f in self.floatids]
        try:
            return keys.index(str(floatid))
        except ValueError:
            raise KeyError('Float {0} not in group'.format(floatid))

    def get(self, floatid):
        """
        Get the ``FloatPath`` with identifier ``floatid``.

        Identifiers are compared as strings, so 1900722 and '1900722'
        refer to the same float.

        """
        return self.floats[self._position(floatid)]

    def subset(self, float_ids):
        """
        New ``FloatGroup`` holding the floats in ``float_ids``, in that order.

        """
        return FloatGroup([self.get(fid) for fid in float_ids])

    def pop(self, ind=-1, floatid=None):
        """
        Remove a ``FloatPath`` from self.

        Parameters
        ----------
        ind : int
            The positional argument of the ``FloatPath`` to remove.
        floatid : int or string
            The identifier of the ``FloatPath`` to remove.  Overrides
            ``ind`` if not None.

        Returns
        -------
        popped : ``FloatPath``

        """
        if floatid is not None:
            ind = self._position(floatid)

        popped = self.floats.pop(ind)
        self.floatids.pop(ind)
        self.floatcount = len(self.floats)

        return popped

    def append(self, floatpath):
        """
        Add a ``FloatPath`` to the end of ``self``.

        """
        if hasattr(floatpath, 'floatid'):
            self.floats.append(floatpath)
            self.floatids.append(floatpath.floatid)
            self.floatcount = len(self.floats)


def _from_record(floatid, record):
    alt_lons = record.get('ALT_LON')
    return FloatPath(floatid, record['LATITUDE'], record['LONGITUDE'],
                     alt_lons=alt_lons)


def make_floatgroup(data):
    """
    Initialize ``FloatPath`` instances and put them in a ``FloatGroup``.

    Parameters
    ----------
    data : ``FloatGroup``, dict, or ``pandas.DataFrame``
        A dict maps float identifiers to records holding 'LATITUDE' and
        'LONGITUDE' arrays (and optionally 'ALT_LON').  Arrays may be
        shaped (1, M) as well as (M).  A ``DataFrame`` must hold 'WMOID',
        'LATITUDE' and 'LONGITUDE' columns (optionally 'ALT_LON').

    Returns
    -------
    floatgroup : ``FloatGroup``

    """
    if isinstance(data, FloatGroup):
        return data

    floats = []

    if isinstance(data, pd.DataFrame):
        for floatid, rows in data.groupby('WMOID', sort=False):
            record = {'LATITUDE': rows['LATITUDE'].values,
                      'LONGITUDE': rows['LONGITUDE'].values}
            if 'ALT_LON' in rows.columns:
                record['ALT_LON'] = rows['ALT_LON'].values
            floats.append(_from_record(floatid, record))

    elif isinstance(data, dict):
        for floatid, record in data.items():
            if isinstance(record, FloatPath):
                floats.append(record)
            else:
                floats.append(_from_record(floatid, record))

    else:
        raise TypeError('Cannot make a FloatGroup from {0}'
                        .format(type(data).__name__))

    return FloatGroup(floats)


def all_coordinates(floatgroup, use_alt_lon=False):
    """
    Concatenated latitudes and longitudes of every float in the group.

    Returns
    -------
    lats, lons : 1D ndarrays of floats

    """
    lats = np.concatenate([f.lats for f in floatgroup])
    lons = np.concatenate([f.get_lons(use_alt_lon) for f in floatgroup])

    return lats, lons
