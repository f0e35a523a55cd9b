"""Rendering subpackage.

Turns analysis results into Pillow images for inspection:

* Region maps, one palette color per spectral region id.
* Component item maps, colored by item kind and color.
* Optional convex hull outlines drawn over either map.

See :mod:`level_analysis.renderer.image` for the drawing routines.
"""
