"""Functions to classify continuous values into ordered bands.

Bands behave like an ordered factor: a fixed list of labels, each with an
integer code, assigned to values using sorted breakpoints. A typical use is
grouping population densities before plotting them by band.
"""

import numpy as np
import pandas as pd

from irlmaps.hatching import CRS


def population_density(gdf, population="population", crs=CRS):
    """Calculate the population density of each feature.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Polygon geodataframe with a population column
    population : str
        Name of the population column
    crs : Any
        Projected CRS used to calculate areas; Irish Transverse Mercator by
        default

    Returns
    -------
    geopandas.GeoDataFrame
        Copy of the geodataframe with ``area_km2`` [km²] and ``density``
        [km⁻²] columns
    """
    gdf = gdf.copy()
    gdf["area_km2"] = gdf.to_crs(crs).area / 1e6
    gdf["density"] = gdf[population] / gdf["area_km2"]
    return gdf


def ordinal_bands(breaks, unit=""):
    """Labels and codes of the bands defined by sorted breakpoints.

    Parameters
    ----------
    breaks : list[float]
        Strictly increasing breakpoints
    unit : str
        Suffix added to each label, e.g. ``" km⁻²"``

    Returns
    -------
    list[tuple[str, int]]
        ``(label, code)`` pairs in ascending order; ``n`` breakpoints give
        ``n + 1`` bands, with open-ended first and last bands
    """
    breaks = list(breaks)
    if not breaks:
        raise ValueError("At least one breakpoint is required")
    if any(lo >= hi for lo, hi in zip(breaks[:-1], breaks[1:])):
        raise ValueError(f"Breakpoints must be strictly increasing: {breaks}")
    labels = [f"< {breaks[0]:,}{unit}"]
    for lo, hi in zip(breaks[:-1], breaks[1:]):
        labels.append(f"{lo:,} - {hi:,}{unit}")
    labels.append(f"≥ {breaks[-1]:,}{unit}")
    return [(label, code) for code, label in enumerate(labels)]


def label_bands(data, breaks, column="density", unit=""):
    """Label each row by the band its value falls into.

    Parameters
    ----------
    data : pandas.DataFrame
        Dataframe or geodataframe with a numeric column
    breaks : list[float]
        Strictly increasing breakpoints; a value equal to a breakpoint falls
        into the band starting at that breakpoint
    column : str
        Name of the column to classify
    unit : str
        Suffix added to each label

    Returns
    -------
    pandas.DataFrame
        Copy of the data with ``band`` (ordered categorical label) and
        ``band_code`` (integer code; -1 for missing values) columns
    """
    bands = ordinal_bands(breaks=breaks, unit=unit)
    breaks = list(breaks)
    data = data.copy()

    conditions = [data[column] < breaks[0]]
    for lo, hi in zip(breaks[:-1], breaks[1:]):
        conditions.append((data[column] >= lo) & (data[column] < hi))
    conditions.append(data[column] >= breaks[-1])
    choices = [code for _, code in bands]
    data["band_code"] = np.select(conditions, choices, default=-1)

    data["band"] = pd.Categorical.from_codes(
        data["band_code"],
        categories=[label for label, _ in bands],
        ordered=True,
    )
    return data
