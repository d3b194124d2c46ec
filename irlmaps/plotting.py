"""Utility functions for plotting hatched regions."""

import geopandas as gpd
import matplotlib.pyplot as plt

from irlmaps import hatching as hat


def plot_hatch(
    region,
    ax=None,
    scale=hat.DEFAULT_SCALE,
    patterns=("left2right",),
    color="black",
    linewidth=0.5,
    boundary=False,
    crs=None,
    **kwargs,
):
    """Draw hatch lines for a region on a Matplotlib axis.

    Parameters
    ----------
    region : geopandas.GeoDataFrame or geopandas.GeoSeries or shapely.Geometry
        The region to hatch
    ax : matplotlib.axes.Axes or None
        Axis to draw on; a new figure is created if ``None``
    scale : float
        Spacing of the grid used to build the hatch
    patterns : str or tuple[str]
        Hatch pattern(s); each pattern is drawn as a separate hatch, e.g.
        ``("left2right", "right2left")`` for crosshatching
    color : str
        Line colour
    linewidth : float
        Line width
    boundary : bool
        Also draw the outline of the region
    crs : Any
        CRS of the region if it is a Shapely geometry
    **kwargs
        Other keyword arguments passed to ``geopandas.GeoSeries.plot``

    Returns
    -------
    matplotlib.axes.Axes
        The axis
    """
    if ax is None:
        _, ax = plt.subplots()
    if isinstance(patterns, str):
        patterns = (patterns,)

    for pattern in patterns:
        hatch = hat.hatch_pattern(
            region=region, scale=scale, pattern=pattern, crs=crs
        )
        hatch = hatch[~hatch.is_empty]
        if hatch.empty:
            continue
        hatch.plot(ax=ax, color=color, linewidth=linewidth, **kwargs)

    if boundary:
        shape, crs = hat.region_shape(region=region, crs=crs)
        gpd.GeoSeries([shape], crs=crs).boundary.plot(
            ax=ax, color=color, linewidth=linewidth
        )

    return ax
