"""
:class:`Strand` is the orientation of a :class:`~slicecantor.region.Region` on its sequence region. Only the two
directional strands exist; every region in an assembly is read on one of them.
"""

from inscripta.slicecantor.location.strand import Strand  # noqa: F401
