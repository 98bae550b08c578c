"""
=========================================
Basic Float Trajectory Plotting
=========================================

How to plot the trajectories of a few floats with ``plot_trajectories``
and choose a mapping backend with ``PlotSettings``.

"""
import floattraj

"""
Float positions
---------------
Positions are given per float as 'LATITUDE' and 'LONGITUDE' arrays,
keyed by the float's WMO number.  A ``pandas.DataFrame`` with a
'WMOID' column works as well.

"""
data = {5904859: {'LATITUDE': [-52.1, -52.6, -53.0, -53.4, -53.9],
                  'LONGITUDE': [-170.2, -171.0, -172.4, -173.1, -174.8]},
        5905072: {'LATITUDE': [-60.3, -60.1, -59.8, -59.2],
                  'LONGITUDE': [178.4, 179.6, -179.1, -177.7]}}

float_ids = [5904859, 5905072]

"""
Both floats stay close to the dateline, so the plot switches to 0..360
longitudes and the trajectories are not split.

Colors
------
'multiple' gives each float its own color, sampled from the colormap.
Any matplotlib color ('r', 'k', '0.5', ...) colors all floats alike.

"""
settings = floattraj.PlotSettings(colormap='viridis', mapping='plain')

floattraj.plot_trajectories(data, 'multiple', 'Southern Ocean floats',
                            'southern_ocean_plain.png', float_ids,
                            settings=settings)

"""
Maps
----
'native' draws on cartopy geographic axes with a gray land base map,
'toolbox' on a Basemap Robinson or Lambert projection (no legend).

"""
for mapping in ['native', 'toolbox']:
    settings = floattraj.PlotSettings(mapping=mapping)
    floattraj.plot_trajectories(data, 'r', 'Southern Ocean floats',
                                'southern_ocean_%s.png' % mapping,
                                float_ids, settings=settings)
