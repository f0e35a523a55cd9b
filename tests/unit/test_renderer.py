# tests/unit/test_renderer.py

from level_analysis.analysis.convex_hull import ConvexHull
from level_analysis.analysis.regions import Regions
from level_analysis.defs import Color, Grid, Position
from level_analysis.levels.component import Component
from level_analysis.renderer.image import (
    INVALID_RGB,
    REGION_PALETTE,
    WALL_RGB,
    region_color,
    render_component,
    render_regions,
)
from level_analysis.types import NULL_REGION_ID
from tests.test_utils import CORRIDOR, ROOM, make_level


def test_region_color() -> None:
    assert region_color(NULL_REGION_ID) == WALL_RGB
    assert region_color(-2) == INVALID_RGB
    assert region_color(0) == REGION_PALETTE[0]
    assert region_color(len(REGION_PALETTE) + 1) == REGION_PALETTE[1]


def test_render_regions_pixels() -> None:
    grid = Grid.filled(2, 3, NULL_REGION_ID)
    grid[(1, 2)] = 4
    img = render_regions(Regions(grid, 5, [Position(1, 2)]), cell_size=8)
    assert img.size == (24, 16)
    assert img.getpixel((4, 4)) == WALL_RGB
    assert img.getpixel((2 * 8 + 4, 8 + 4)) == REGION_PALETTE[4]


def test_render_regions_with_hull() -> None:
    (comp,) = Component.all(make_level(ROOM))
    img = render_regions(Regions.build(comp, 2), ConvexHull.of_component(comp), cell_size=4)
    assert img.size == (20, 20)
    assert img.mode == "RGB"


def test_render_component_colors() -> None:
    (comp,) = Component.all(make_level(CORRIDOR, colors={"a": Color.GREEN}))
    img = render_component(comp, cell_size=10)
    assert img.size == (60, 30)
    assert img.getpixel((5, 5)) == WALL_RGB
    assert img.getpixel((15, 15)) == Color.GREEN.rgb


def test_render_raw_regions_flags_unbinned_cell() -> None:
    (comp,) = Component.all(make_level(CORRIDOR))
    regions = Regions.build(comp, 2, clamp=False)
    (cell,) = regions.cells_in(NULL_REGION_ID)
    img = render_regions(regions, cell_size=4)
    assert img.getpixel((cell.col * 4 + 2, cell.row * 4 + 2)) == INVALID_RGB
    assert img.getpixel((2, 2)) == WALL_RGB
