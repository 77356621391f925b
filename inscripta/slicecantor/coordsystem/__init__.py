"""
A :class:`CoordSystem` names the space a :class:`~slicecantor.region.Region` is defined on. Regions on different
coordinate systems are related only through assembly mappers.
"""

from inscripta.slicecantor.coordsystem.coord_system import CoordSystem, TOP_LEVEL_NAME  # noqa: F401
