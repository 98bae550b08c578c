import pytest

from floattraj import FloatIndex
from floattraj.agency import as_float_index

INDEX_TEXT = """# Title : Synthetic-Profile directory file of the Argo GDAC
# Description : The directory file describes all individual profile files
file,date,latitude,longitude,ocean,profiler_type,institution,parameters,parameter_data_mode,date_update
aoml/1900722/profiles/SD1900722_001.nc,20061022020614,-40.194,73.805,I,846,AO,PRES TEMP PSAL DOXY,RRRR,20181011180520
aoml/1900722/profiles/SD1900722_002.nc,20061101000317,-40.239,73.848,I,846,AO,PRES TEMP PSAL DOXY,RRRR,20181011180521
coriolis/6901585/profiles/SD6901585_001.nc,20140624080500,43.396,7.885,M,836,IF,PRES TEMP PSAL DOXY,RRRR,20200923103817
"""


def test_from_profile_index(tmp_path):
    fn = tmp_path / 'argo_synthetic-profile_index.txt'
    fn.write_text(INDEX_TEXT)

    index = FloatIndex.from_profile_index(str(fn))

    assert len(index) == 2
    assert index.dac(1900722) == 'aoml'
    assert index.dac('6901585') == 'coriolis'


def test_dacs_for(two_dac_index):
    index = as_float_index(two_dac_index)

    assert index.dacs_for([6901585, 1900722, 5904859]) == ['aoml',
                                                           'coriolis']


def test_unknown_float():
    index = FloatIndex([1], ['csiro'])

    assert 1 in index
    with pytest.raises(KeyError):
        index.dac(2)


def test_bogus_index():
    with pytest.raises(TypeError):
        as_float_index(['aoml'])
