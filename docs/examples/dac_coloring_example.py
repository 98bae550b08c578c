"""
===================================
Coloring Trajectories by DAC
===================================

Each float's data are distributed by a Data Assembly Center (DAC).
With ``color='dac'`` the floats are colored by their DAC and the legend
lists the DACs instead of the floats.

"""
import floattraj

"""
The float index
---------------
The DAC of each float is read from the Argo synthetic profile index,
available from the GDAC as ``argo_synthetic-profile_index.txt``.
A plain dict of {float: dac} can be used instead.

"""
index = floattraj.FloatIndex.from_profile_index(
    r'Index/argo_synthetic-profile_index.txt')

data = {1902303: {'LATITUDE': [32.1, 32.4, 32.9],
                  'LONGITUDE': [-64.2, -64.0, -63.5]},
        6901585: {'LATITUDE': [43.4, 43.2, 42.9],
                  'LONGITUDE': [7.9, 7.7, 7.2]},
        5906441: {'LATITUDE': [-35.0, -35.8, -36.3],
                  'LONGITUDE': [150.6, 151.8, 152.0]}}

settings = floattraj.PlotSettings(colormap='tab10', mapping='native')

floattraj.plot_trajectories(data, 'dac', 'Floats by DAC', 'floats_dac.png',
                            list(data), settings=settings, float_index=index)
