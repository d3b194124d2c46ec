"""Functions to generate hatching patterns for shapes.

A hatch is drawn as a set of evenly spaced parallel lines clipped to a shape,
used on maps in place of, or on top of, a fill colour.

Each hatch is built from a regular square grid covering the bounding box of
the shape. One straight segment is taken from every grid cell by joining two
of the cell's corners; the segments are then clipped to the shape and merged
into continuous lines.

Cell corners are numbered counter-clockwise from the bottom-left corner:

====== ============
Index  Corner
====== ============
1      bottom-left
2      bottom-right
3      top-right
4      top-left
====== ============

References
----------
.. [#Brennan20] Brennan, J. (2020). ‘Fast and easy gridding of point data with
    geopandas’, 16 March. Available at:
    https://james-brennan.github.io/posts/fast_gridding_geopandas/
    (Accessed: 1 January 2024).
"""

import math

import geopandas as gpd
import shapely

# Irish Transverse Mercator
CRS = 2157

# default grid cell size [m]
DEFAULT_SCALE = 1000

CORNERS = {1: "bottom-left", 2: "bottom-right", 3: "top-right", 4: "top-left"}

# pairs of corners joined in each cell
PATTERNS = {
    "horizontal": (2, 1),
    "vertical": (1, 4),
    "left2right": (2, 4),
    "right2left": (1, 3),
}


def region_shape(region, crs=None):
    """Extract a single (multi)polygon and its CRS from a region.

    Parameters
    ----------
    region : geopandas.GeoDataFrame or geopandas.GeoSeries or shapely.Geometry
        The region; all features of a geodataframe or geoseries are combined
        into one shape
    crs : Any
        CRS of the region; required if ``region`` is a Shapely geometry and
        ignored otherwise

    Returns
    -------
    tuple[shapely.Geometry, pyproj.CRS or Any]
        The shape and its CRS
    """
    if isinstance(region, (gpd.GeoDataFrame, gpd.GeoSeries)):
        crs = region.crs
        shape = region.geometry.union_all()
    elif isinstance(region, shapely.Geometry):
        shape = region
    else:
        raise TypeError(
            f"Unsupported region type: {type(region).__name__}; expected a "
            "GeoDataFrame, GeoSeries, or Shapely geometry"
        )
    if crs is None:
        raise ValueError("The region has no CRS")
    if shape.is_empty:
        raise ValueError("The region is empty")
    if shape.geom_type not in ["Polygon", "MultiPolygon"]:
        raise ValueError(
            f"The region must be a (multi)polygon, not a {shape.geom_type}"
        )
    return shape, crs


def check_scale(scale):
    """Raise an error if the grid cell size is not a positive number."""
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"Scale must be a positive number, not {scale}")


def check_pattern(pattern):
    """Raise an error if the pattern is not one of ``PATTERNS``."""
    if pattern not in PATTERNS:
        raise ValueError(
            f"Unsupported pattern: '{pattern}'; use one of "
            f"{', '.join(PATTERNS)}"
        )


def make_grid(region, scale=DEFAULT_SCALE, crs=None):
    """Generate a regular square grid covering the bounding box of a region.

    Parameters
    ----------
    region : geopandas.GeoDataFrame or geopandas.GeoSeries or shapely.Geometry
        The region
    scale : float
        Side length of each grid cell, in the linear units of the CRS
    crs : Any
        CRS of the region if it is a Shapely geometry

    Returns
    -------
    geopandas.GeoDataFrame
        A polygon geodataframe of the grid cells

    Notes
    -----
    The grid is anchored at the lower-left corner of the bounding box and
    extends right and up by whole cells until the bounding box is covered.
    Gridding method based on [#Brennan20]_.
    """
    shape, crs = region_shape(region=region, crs=crs)
    check_scale(scale=scale)
    xmin_, ymin_, xmax_, ymax_ = shape.bounds
    ncols = max(1, math.ceil((xmax_ - xmin_) / scale))
    nrows = max(1, math.ceil((ymax_ - ymin_) / scale))

    # cell edges are derived from the cell index so adjacent cells share
    # exactly the same corner coordinates
    grid_cells = []
    for i in range(ncols):
        x0 = xmin_ + i * scale
        x1 = xmin_ + (i + 1) * scale
        for j in range(nrows):
            y0 = ymin_ + j * scale
            y1 = ymin_ + (j + 1) * scale
            grid_cells.append(shapely.geometry.box(x0, y0, x1, y1))
    grid_cells = gpd.GeoDataFrame(grid_cells, columns=["geometry"], crs=crs)
    return grid_cells


def cell_corners(cell):
    """Corner coordinates of a grid cell.

    Parameters
    ----------
    cell : shapely.Polygon
        Grid cell

    Returns
    -------
    list[tuple[float, float]]
        Bottom-left, bottom-right, top-right, and top-left corners
    """
    minx, miny, maxx, maxy = cell.bounds
    return [(minx, miny), (maxx, miny), (maxx, maxy), (minx, maxy)]


def hatch_segments(grid, pattern="left2right"):
    """Join two corners of each grid cell with a straight line segment.

    Parameters
    ----------
    grid : geopandas.GeoDataFrame
        Grid cells
    pattern : str
        One of ``"horizontal"``, ``"vertical"``, ``"left2right"``, or
        ``"right2left"``

    Returns
    -------
    geopandas.GeoSeries
        One line segment per grid cell
    """
    check_pattern(pattern=pattern)
    start, end = PATTERNS[pattern]
    segments = []
    for cell in grid.geometry:
        corners = cell_corners(cell=cell)
        segments.append(
            shapely.geometry.LineString([corners[start - 1], corners[end - 1]])
        )
    return gpd.GeoSeries(segments, index=grid.index, crs=grid.crs)


def hatch_pattern(region, scale=DEFAULT_SCALE, pattern="left2right", crs=None):
    """Generate hatch lines clipped to a region.

    Parameters
    ----------
    region : geopandas.GeoDataFrame or geopandas.GeoSeries or shapely.Geometry
        The region to hatch; all features of a geodataframe or geoseries are
        combined into one shape
    scale : float
        Spacing of the grid used to build the hatch, in the linear units of
        the CRS; smaller values give denser hatching
    pattern : str
        Line direction; one of the following:
        ``"horizontal"``: horizontal lines;
        ``"vertical"``: vertical lines;
        ``"left2right"``: diagonals falling from top-left to bottom-right;
        ``"right2left"``: diagonals rising from bottom-left to top-right
    crs : Any
        CRS of the region if it is a Shapely geometry

    Returns
    -------
    geopandas.GeoSeries
        A single (multi)linestring of the hatch in the region's CRS; the
        linestring is empty if no grid line crosses the region

    Notes
    -----
    Clipping can leave isolated points where a grid line only touches the
    region; these are dropped. Crosshatching is drawn by generating two
    hatches with different patterns.
    """
    shape, crs = region_shape(region=region, crs=crs)
    check_scale(scale=scale)
    check_pattern(pattern=pattern)

    grid = make_grid(region=shape, scale=scale, crs=crs)
    segments = hatch_segments(grid=grid, pattern=pattern)

    # clip to the region and keep only the line parts
    lines = segments.intersection(shape).explode(index_parts=False)
    lines = lines[(lines.geom_type == "LineString") & ~lines.is_empty]

    if lines.empty:
        return gpd.GeoSeries([shapely.geometry.MultiLineString()], crs=crs)

    return gpd.GeoSeries([shapely.line_merge(lines.union_all())], crs=crs)


def hatch_frame(gdf, scale=DEFAULT_SCALE, pattern="left2right"):
    """Replace the geometry of each feature with its hatch lines.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Polygon geodataframe of regions
    scale : float
        Spacing of the grid used to build the hatch
    pattern : str
        Line direction; see ``hatch_pattern``

    Returns
    -------
    geopandas.GeoDataFrame
        Copy of the geodataframe with hatch lines as the geometry
    """
    print(f"Number of regions: {len(gdf):,}")
    hatch = gdf.copy()
    hatch[gdf.geometry.name] = gpd.GeoSeries(
        [
            hatch_pattern(region=g, scale=scale, pattern=pattern, crs=gdf.crs)
            .iloc[0]
            for g in gdf.geometry
        ],
        index=gdf.index,
        crs=gdf.crs,
    )
    print(f"Regions without hatching: {hatch.is_empty.sum():,}")
    print("-" * 60)
    return hatch
