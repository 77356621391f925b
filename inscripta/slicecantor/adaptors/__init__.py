"""
Data-access collaborators are injected into a :class:`~slicecantor.region.Region` through a
:class:`DatabaseAdaptor`. Nothing in this package locates adaptors globally.
"""

from inscripta.slicecantor.adaptors.adaptors import (  # noqa: F401
    AssemblyMapper,
    AssemblyMapperAdaptor,
    Attribute,
    AttributeAdaptor,
    CoordSystemAdaptor,
    DatabaseAdaptor,
    FeatureAdaptor,
    RegionAdaptor,
    SequenceAdaptor,
)
