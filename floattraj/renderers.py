import logging

from .mapmaker import float_scatter, make_legend
from .settings import Mapping

logger = logging.getLogger(__name__)


class Renderer(object):
    """
    Draws a ``FloatGroup`` into a figure.

    :superclass: for ``NativeRenderer``, ``ToolboxRenderer`` and
        ``PlainRenderer``.

    """

    has_legend = True

    def render(self, floatgroup, limits, scheme, settings, fig):
        """
        Draw the float positions.

        Parameters
        ----------
        floatgroup : ``FloatGroup``
        limits : ``MapLimits``
            Map limits and longitude convention.
        scheme : ``ColorScheme``
            Per-float colors and, when coloring by DAC, legend entries.
        settings : ``PlotSettings``
        fig : ``Figure`` instance

        Returns
        -------
        ax : ``Axes`` instance
            The axis drawn into.

        """
        raise NotImplementedError

    def _finish(self, ax, settings):
        if self.has_legend:
            make_legend(ax, settings)

    def _scatter_dacs(self, target, floatgroup, limits, scheme, settings,
                      **kwargs):
        # One point per DAC so the legend lists DACs rather than floats
        for entry in scheme.legend:
            lat, lon = floatgroup.get(entry.floatid).first_fix(
                limits.use_alt_lon)
            float_scatter(target, [lon], [lat], entry.color,
                          settings.markersize, label=entry.label, **kwargs)

    def _scatter_floats(self, target, floatgroup, limits, scheme, settings,
                        **kwargs):
        for floatpath, color in zip(floatgroup, scheme.colors):
            if scheme.by_dac:
                label = '_nolegend_'
            else:
                label = str(floatpath.floatid)
            float_scatter(target, floatpath.get_lons(limits.use_alt_lon),
                          floatpath.lats, color, settings.markersize,
                          label=label, **kwargs)


class NativeRenderer(Renderer):
    """Geographic axes with a base map (cartopy)."""

    def render(self, floatgroup, limits, scheme, settings, fig):
        from .cartodesigner import CartoDesign

        design = CartoDesign(limits.latlim, limits.lonlim,
                             use_alt_lon=limits.use_alt_lon,
                             colors=settings.basemap_colors)
        ax = design.make_cartopy(fig=fig)

        if scheme.by_dac:
            self._scatter_dacs(ax, floatgroup, limits, scheme, settings,
                               transform=design.data_crs)
        self._scatter_floats(ax, floatgroup, limits, scheme, settings,
                             transform=design.data_crs)

        self._finish(ax, settings)

        return ax


class ToolboxRenderer(Renderer):
    """
    Projected map drawn with ``Basemap``.

    Legends are not drawn in this mode.

    """
    has_legend = False

    def render(self, floatgroup, limits, scheme, settings, fig):
        from .mapdesigner import MapDesign

        ax = fig.add_subplot(1, 1, 1)

        design = MapDesign(limits.latlim, limits.lonlim)
        basemap = design.make_basemap(ax=ax)
        logger.debug('Basemap projection: %s', design.projection)

        self._scatter_floats(basemap, floatgroup, limits, scheme, settings,
                             latlon=True)

        design.set_view(basemap)
        self._finish(ax, settings)

        return ax


class PlainRenderer(Renderer):
    """Ordinary longitude/latitude scatter plot."""

    def render(self, floatgroup, limits, scheme, settings, fig):
        ax = fig.add_subplot(1, 1, 1)

        if scheme.by_dac:
            self._scatter_dacs(ax, floatgroup, limits, scheme, settings)
        self._scatter_floats(ax, floatgroup, limits, scheme, settings)

        ax.set_frame_on(True)
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')

        self._finish(ax, settings)

        return ax


RENDERERS = {Mapping.NATIVE: NativeRenderer(),
             Mapping.TOOLBOX: ToolboxRenderer(),
             Mapping.PLAIN: PlainRenderer()}


def get_renderer(mapping):
    """
    Get the renderer of a ``Mapping`` member.

    """
    return RENDERERS[Mapping(mapping)]
