"""
Projection of a :class:`~slicecantor.region.Region` onto another coordinate system.

A projection is an ordered list of :class:`ProjectionSegment` objects. The ``from_start``/``from_end`` of the
segments are in the numbering of the projected region and advance monotonically from 1. Pieces of the region with no
mapping in the target coordinate system consume numbering but produce no segment.

The region is first decomposed into its query regions (two halves if it spans the origin), each query region is
normalized into its symlinked components, and each component is mapped through the assembly mapper between its
coordinate system and the target.
"""
import logging
import warnings
from typing import List, TypeVar, Optional

from inscripta.slicecantor.adaptors import DatabaseAdaptor
from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.exc import (
    MissingAdaptorWarning,
    MissingCoordSystemWarning,
    UnknownCoordSystemException,
    ValidationException,
)
from inscripta.slicecantor.mapper import Gap, MappingResult
from inscripta.slicecantor.projection.segment import ProjectionSegment
from inscripta.slicecantor.region.splitter import decompose

Region = TypeVar("Region")

logger = logging.getLogger(__name__)


def project(region: Region, cs_name: str, cs_version: Optional[str] = None) -> List[ProjectionSegment]:
    """Projects ``region`` onto the coordinate system named ``cs_name``.

    Args:
        region: Region to project.
        cs_name: Name of the target coordinate system, e.g. ``contig`` or ``chromosome``.
        cs_version: Version of the target coordinate system. The default version is used if not given.

    Returns:
        Ordered projection segments. Empty if ``region`` has no adaptor or no coordinate system.

    Raises:
        ValidationException: if ``cs_name`` is empty.
        UnknownCoordSystemException: if the target coordinate system does not exist.
    """
    if not cs_name:
        raise ValidationException("Coordinate system name argument is required")
    if region.adaptor is None:
        warnings.warn(MissingAdaptorWarning("Cannot project without attached adaptor"))
        return []
    if region.coord_system is None:
        warnings.warn(MissingCoordSystemWarning("Cannot project without attached coordinate system"))
        return []

    adaptor = region.adaptor
    target_cs = adaptor.coord_system_adaptor.fetch_by_name(cs_name, cs_version)
    if target_cs is None:
        raise UnknownCoordSystemException(f"Cannot project to unknown coordinate system [{cs_name} {cs_version}]")

    # no mapping is needed if the requested coordinate system is the one we are in, but parts of the region may
    # still lie outside the sequence region
    if region.coord_system == target_cs:
        return region.constrain_to_region()

    projection = _project_components(adaptor, decompose(region), target_cs)
    if projection is None:
        # e.g. a pseudo-autosomal region on Y referring to X, projected to the top level
        logger.debug(f"Normalized projection of {region} mapped back onto its own coordinate system")
        return region.constrain_to_region()
    return projection


def project_to_region(region: Region, target_region: Region) -> List[ProjectionSegment]:
    """Projects ``region`` onto one specific region of another coordinate system. Needed when there are multiple
    mappings and the caller must state which one to project to.

    Unlike :func:`project`, the region is normalized as a whole rather than split at the origin, and a component
    mapping back onto its own coordinate system is projected like any other.
    """
    if target_region is None:
        raise ValidationException("Target region argument is required")
    if region.adaptor is None:
        warnings.warn(MissingAdaptorWarning("Cannot project without attached adaptor"))
        return []

    adaptor = region.adaptor
    projection = _project_components(
        adaptor, [region], target_region.coord_system, target_region=target_region, allow_identity=True
    )
    # the mapper cache is specific to this target region
    adaptor.assembly_mapper_adaptor.delete_cache()
    return projection


def _project_components(
    adaptor: DatabaseAdaptor,
    query_regions: List[Region],
    target_cs: CoordSystem,
    target_region: Optional[Region] = None,
    allow_identity: bool = False,
) -> Optional[List[ProjectionSegment]]:
    """Builds the projection of ``query_regions`` in order. Returns None as soon as a component maps back onto its
    own coordinate system, unless ``allow_identity`` is set."""
    projection = []
    current_start = 1
    for query_region in query_regions:
        # decompose into symlinked components to handle haplotypes and PARs
        for normalized in adaptor.region_adaptor.fetch_normalized_region_projection(query_region):
            component = normalized.to_region
            for result in _map_component(adaptor, component, target_cs, target_region):
                if not result.is_gap:
                    if not allow_identity and result.coord_system == component.coord_system:
                        return None
                    to_region = adaptor.region_adaptor.fetch_by_seq_region_id(
                        result.seq_region_id, result.start, result.end, result.strand
                    )
                    projection.append(ProjectionSegment(current_start, current_start + result.length - 1, to_region))
                current_start += result.length
    return projection


def _map_component(
    adaptor: DatabaseAdaptor, component: Region, target_cs: CoordSystem, target_region: Optional[Region]
) -> List[MappingResult]:
    mapper = adaptor.assembly_mapper_adaptor.fetch_by_coord_systems(component.coord_system, target_cs)
    if mapper is None:
        logger.debug(f"No assembly mapper between {component.coord_system} and {target_cs}")
        return [Gap(component.start, component.end)]
    return mapper.map(
        component.seq_region_name,
        component.start,
        component.end,
        component.strand,
        component.coord_system,
        target_region=target_region,
    )
