"""
Projection of regions between coordinate systems. A projection is a list of :class:`ProjectionSegment` triplets.
"""

from inscripta.slicecantor.projection.segment import ProjectionSegment  # noqa: F401
from inscripta.slicecantor.projection.projector import project, project_to_region  # noqa: F401
