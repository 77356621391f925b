"""
:class:`Region` objects represent an interval of a sequence region in some coordinate system. A
:class:`CircularRegion` lives on a circular sequence region and may span its origin; :func:`split` decomposes such a
region into the two linear halves that collaborators are queried with.
"""

from inscripta.slicecantor.region.region import Region  # noqa: F401
from inscripta.slicecantor.region.circular import CircularRegion  # noqa: F401
from inscripta.slicecantor.region.splitter import split, decompose  # noqa: F401
