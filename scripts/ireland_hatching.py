#!/usr/bin/env python
# coding: utf-8

# # Hatched map of the Island of Ireland
#
# Requires the NUTS 2021 Level 1 boundaries for the Island of Ireland saved
# to a GeoPackage, with one feature per NUTS region (IE0 and UKN).
#
# <https://ec.europa.eu/eurostat/web/gisco/geodata/reference-data/administrative-units-statistical-units/nuts>

import os

import geopandas as gpd
import matplotlib.pyplot as plt

from irlmaps import hatching as hat
from irlmaps import plotting as plot

# In[1]:


GPKG_BOUNDARY = os.path.join("data", "boundaries.gpkg")
LAYER = "NUTS_RG_01M_2021_4326_LEVL_1_IE"

# grid cell size for the hatching [m]
SCALE = 10000


# In[2]:


nuts = gpd.read_file(GPKG_BOUNDARY, layer=LAYER).to_crs(hat.CRS)

nuts[["NUTS_ID", "NAME_LATN"]]


# In[3]:


ax = nuts.plot(
    color="white",
    figsize=(7.5, 7.5),
    edgecolor="darkslategrey",
    linewidth=0.4,
)

# Republic of Ireland - single diagonal hatch
plot.plot_hatch(
    region=nuts[nuts["NUTS_ID"] == "IE0"],
    ax=ax,
    scale=SCALE,
    patterns="left2right",
    color="seagreen",
)

# Northern Ireland - crosshatch
plot.plot_hatch(
    region=nuts[nuts["NUTS_ID"] == "UKN"],
    ax=ax,
    scale=SCALE,
    patterns=("left2right", "right2left"),
    color="crimson",
)

plt.title("Island of Ireland")
plt.tick_params(labelbottom=False, labelleft=False)
plt.tight_layout()
plt.show()


# In[4]:


# hatch each region separately, keeping its attributes
hatch = hat.hatch_frame(gdf=nuts, scale=SCALE, pattern="horizontal")

hatch.plot(column="NUTS_ID", figsize=(7.5, 7.5), linewidth=0.5)
plt.tick_params(labelbottom=False, labelleft=False)
plt.tight_layout()
plt.show()
