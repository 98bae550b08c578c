import logging

import pandas as pd

logger = logging.getLogger(__name__)


class FloatIndex(object):
    """
    Lookup of the Data Assembly Center (DAC) responsible for each float.

    """

    def __init__(self, wmoids, dacs):
        """
        Initialize ``FloatIndex``.

        Parameters
        ----------
        wmoids : list of ints or strings
            Float identifiers.
        dacs : list of strings
            The DAC of each float in ``wmoids``.

        """
        if len(wmoids) != len(dacs):
            raise ValueError('Need one DAC per float')

        self.wmoids = [str(w) for w in wmoids]
        self.dacs = list(dacs)
        self._lookup = dict(zip(self.wmoids, self.dacs))

    def __len__(self):
        return len(self.wmoids)

    def __contains__(self, floatid):
        return str(floatid) in self._lookup

    @classmethod
    def from_mapping(cls, mapping):
        """Build a ``FloatIndex`` from a dict of {floatid: dac}."""
        return cls(list(mapping.keys()), list(mapping.values()))

    @classmethod
    def from_profile_index(cls, filename):
        """
        Read an Argo profile index file.

        Parameters
        ----------
        filename : string
            Path to an index such as ``argo_synthetic-profile_index.txt``.
            Lines starting with '#' are skipped; the 'file' column holds
            paths of the form 'dac/wmoid/profiles/...'.

        Returns
        -------
        ``FloatIndex``

        """
        index = pd.read_csv(filename, comment='#', usecols=['file'])

        parts = index['file'].str.split('/', n=2, expand=True)
        floats = (pd.DataFrame({'dac': parts[0], 'wmoid': parts[1]})
                  .drop_duplicates(subset='wmoid'))

        logger.debug('Read %d floats from %s', len(floats), filename)

        return cls(floats['wmoid'].tolist(), floats['dac'].tolist())

    def dac(self, floatid):
        """
        The DAC of float ``floatid``.

        Raises
        ------
        KeyError
            If the float is not in the index.

        """
        try:
            return self._lookup[str(floatid)]
        except KeyError:
            raise KeyError('Float {0} not in the float index'.format(floatid))

    def dacs_for(self, float_ids):
        """
        Sorted list of the distinct DACs of ``float_ids``.

        """
        return sorted(set(self.dac(fid) for fid in float_ids))


def as_float_index(obj):
    """
    Return ``obj`` as a ``FloatIndex``.

    Parameters
    ----------
    obj : ``FloatIndex`` or dict of {floatid: dac}

    """
    if isinstance(obj, FloatIndex):
        return obj
    if isinstance(obj, dict):
        return FloatIndex.from_mapping(obj)
    raise TypeError('Cannot use {0} as a float index'
                    .format(type(obj).__name__))
