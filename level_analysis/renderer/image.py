from typing import Optional, Tuple

from PIL import Image, ImageDraw

from level_analysis.analysis.convex_hull import ConvexHull
from level_analysis.analysis.regions import Regions
from level_analysis.defs import Item
from level_analysis.levels.component import Component
from level_analysis.types import NULL_REGION_ID, RegionId


DEFAULT_CELL_SIZE = 16

RGB = Tuple[int, int, int]

WALL_RGB: RGB = (58, 58, 58)
FLOOR_RGB: RGB = (235, 235, 235)
INVALID_RGB: RGB = (215, 0, 0)
HULL_RGB: RGB = (0, 0, 0)

REGION_PALETTE: Tuple[RGB, ...] = (
    (0, 95, 0),
    (0, 95, 215),
    (0, 215, 0),
    (255, 0, 0),
    (0, 175, 215),
    (175, 0, 215),
    (255, 175, 0),
    (255, 0, 215),
    (255, 255, 0),
    (0, 255, 215),
    (95, 255, 0),
    (95, 0, 215),
    (95, 0, 0),
)


def region_color(region: RegionId) -> RGB:
    if region == NULL_REGION_ID:
        return WALL_RGB
    if region < 0:
        return INVALID_RGB
    return REGION_PALETTE[region % len(REGION_PALETTE)]


def item_color(item: Item) -> RGB:
    if item.is_wall():
        return WALL_RGB
    if item.is_empty():
        return FLOOR_RGB
    return item.color.rgb


def _draw_hull(draw: ImageDraw.ImageDraw, hull: ConvexHull, cell_size: int) -> None:
    # hull vertices are cell corners: x = col, y = row in image space
    outline = [(v.col * cell_size, v.row * cell_size) for v in hull]
    outline.append(outline[0])
    draw.line(outline, fill=HULL_RGB, width=max(1, cell_size // 8))


def render_regions(
    regions: Regions,
    hull: Optional[ConvexHull] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """Draw one colored square per free cell; optionally outline the hull."""
    rows, cols = regions.size()
    img = Image.new("RGB", (cols * cell_size, rows * cell_size), WALL_RGB)
    draw = ImageDraw.Draw(img)
    # walls are the background; an unbinned free cell shows as invalid
    for pos in regions.cells:
        region = regions[pos]
        x0, y0 = pos.col * cell_size, pos.row * cell_size
        draw.rectangle(
            [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
            fill=region_color(region) if region >= 0 else INVALID_RGB,
        )
    if hull is not None:
        _draw_hull(draw, hull, cell_size)
    return img


def render_component(
    comp: Component,
    hull: Optional[ConvexHull] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """Draw the component's items colored by kind and color."""
    rows, cols = comp.size()
    img = Image.new("RGB", (cols * cell_size, rows * cell_size), WALL_RGB)
    draw = ImageDraw.Draw(img)
    for pos in comp.grid.positions():
        x0, y0 = pos.col * cell_size, pos.row * cell_size
        draw.rectangle(
            [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
            fill=item_color(comp[pos]),
        )
    if hull is not None:
        _draw_hull(draw, hull, cell_size)
    return img
