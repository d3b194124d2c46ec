"""irlmaps

Hatching patterns and ordinal bands for maps of Ireland made with GeoPandas
and Matplotlib
"""

__version__ = "2024.10.0"
