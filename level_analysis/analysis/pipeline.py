"""Level-wide analysis pipeline.

Runs component extraction and then, for every component, the spectral
segmentation and the convex hull. Each component is processed on its own,
so callers may fan the components out to worker threads.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from level_analysis.analysis.convex_hull import ConvexHull
from level_analysis.analysis.regions import Regions
from level_analysis.config import AnalysisConfig
from level_analysis.defs import Position
from level_analysis.levels.component import Component
from level_analysis.levels.level import Level

logger = logging.getLogger(__name__)

MIN_ANALYSIS_CELLS = 2


@dataclass(frozen=True)
class ComponentAnalysis:
    """Results for one component.

    Attributes:
        component: The analysed component.
        regions: Spectral regions, ``None`` for single-cell components.
        hull: Convex hull of the free cells, ``None`` for single-cell components.
    """

    component: Component
    regions: Optional[Regions]
    hull: Optional[ConvexHull]

    def hull_cells(self) -> List[Position]:
        """Free cells whose unit square overlaps the hull, in index order."""
        if self.hull is None:
            return []
        return [pos for pos in self.component.free_cells() if self.hull.contains_cell(pos)]


def analyze_component(
    comp: Component, config: Optional[AnalysisConfig] = None
) -> ComponentAnalysis:
    config = config or AnalysisConfig()
    if comp.nb_free_cells() < MIN_ANALYSIS_CELLS:
        logger.info("Skipping analysis of %r: too few free cells", comp)
        return ComponentAnalysis(comp, None, None)

    regions = Regions.build(
        comp,
        config.nb_regions,
        clamp=config.clamp_regions,
        solver=config.eigen_solver,
        gap_tolerance=config.eigen_gap_tolerance,
    )
    hull = ConvexHull.of_component(comp, config.hull_epsilon)
    logger.debug("%r: hull of %d vertices, area %g", comp, len(hull), hull.area())
    return ComponentAnalysis(comp, regions, hull)


def analyze_level(
    level: Level, config: Optional[AnalysisConfig] = None
) -> List[ComponentAnalysis]:
    """Analyse every goal-holding component of ``level`` in extraction order."""
    config = config or AnalysisConfig()
    return [analyze_component(comp, config) for comp in Component.all(level)]
