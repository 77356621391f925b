"""
Abstract data-access collaborators. A :class:`~slicecantor.region.Region` never talks to a database directly;
instead it optionally holds a :class:`DatabaseAdaptor` bundling one implementation of each collaborator below.
Implementations live with whatever storage layer is in use and are injected by the caller.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TypeVar, Optional, List, Dict, NamedTuple

from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.mapper import MappingResult

Region = TypeVar("Region")
ProjectionSegment = TypeVar("ProjectionSegment")


class Attribute(NamedTuple):
    """A coded attribute attached to a sequence region, such as ``circular_seq`` or ``htg_phase``."""

    code: str
    value: str
    name: Optional[str] = None
    description: Optional[str] = None


class SequenceAdaptor(ABC):
    @abstractmethod
    def fetch_by_region_start_end_strand(
        self, region: Region, start: int = 1, end: Optional[int] = None, strand: Strand = Strand.PLUS
    ) -> str:
        """Returns the sequence of ``region`` between ``start`` and ``end``. Both positions are 1-based, inclusive,
        and relative to the start of the region; ``end=None`` means the end of the region. The sequence is
        returned on ``strand`` relative to the region."""


class FeatureAdaptor(ABC):
    @abstractmethod
    def fetch_all_by_region(self, region: Region, **filters) -> List:
        """Returns every feature of one category overlapping ``region``. ``region`` is always non-wrapping."""


class AttributeAdaptor(ABC):
    @abstractmethod
    def fetch_all_by_region(self, region: Region) -> List[Attribute]:
        """Returns the attributes of the sequence region ``region`` lies on."""


class CoordSystemAdaptor(ABC):
    @abstractmethod
    def fetch_by_name(self, name: str, version: Optional[str] = None) -> Optional[CoordSystem]:
        """Returns the coordinate system with this name and version, or the default version if ``version`` is not
        given. Returns None if no such coordinate system exists."""


class AssemblyMapper(ABC):
    @abstractmethod
    def map(
        self,
        seq_region_name: str,
        start: int,
        end: int,
        strand: Strand,
        coord_system: CoordSystem,
        target_region: Optional[Region] = None,
    ) -> List[MappingResult]:
        """Maps an interval of ``seq_region_name`` on ``coord_system`` to the other coordinate system of this mapper.
        Results are ordered and together cover ``start`` to ``end``. If ``target_region`` is given, only mappings
        onto that region are resolved; everything else is returned as gaps."""


class AssemblyMapperAdaptor(ABC):
    @abstractmethod
    def fetch_by_coord_systems(self, cs1: CoordSystem, cs2: CoordSystem) -> Optional[AssemblyMapper]:
        """Returns a mapper between two coordinate systems, or None if there is no mapping path between them."""

    def delete_cache(self):
        """Discards any cached mapper state. Mappers that keep no cache need not override this."""
        pass


class RegionAdaptor(ABC):
    @abstractmethod
    def fetch_normalized_region_projection(self, region: Region) -> List[ProjectionSegment]:
        """Decomposes ``region`` into its symlinked components (haplotypes, pseudo-autosomal regions). A region
        without symlinks projects onto itself as a single segment."""

    @abstractmethod
    def fetch_by_seq_region_id(self, seq_region_id: int, start: int, end: int, strand: Strand) -> Region:
        """Constructs a Region on the sequence region with this internal identifier."""

    @abstractmethod
    def get_seq_region_id(self, region: Region) -> Optional[int]:
        """Returns the internal identifier of the sequence region ``region`` lies on."""


@dataclass(frozen=True)
class DatabaseAdaptor:
    """
    The data-access capability of a Region. A Region either holds one of these or is detached; a detached Region
    falls back to N-padded sequence and returns empty results (with a warning) for every lookup.

    ``feature_adaptors`` are keyed by feature category, e.g. ``gene`` or ``dna_align_feature``.
    ``generic_feature_adaptors`` are additional, user-registered categories.
    """

    region_adaptor: RegionAdaptor
    sequence_adaptor: SequenceAdaptor
    attribute_adaptor: AttributeAdaptor
    coord_system_adaptor: CoordSystemAdaptor
    assembly_mapper_adaptor: AssemblyMapperAdaptor
    feature_adaptors: Dict[str, FeatureAdaptor] = field(default_factory=dict)
    generic_feature_adaptors: Dict[str, FeatureAdaptor] = field(default_factory=dict)

    def get_feature_adaptor(self, feature_type: str) -> Optional[FeatureAdaptor]:
        return self.feature_adaptors.get(feature_type)

    def get_generic_feature_adaptors(self, *names: str) -> Dict[str, FeatureAdaptor]:
        """Returns the named generic feature adaptors, or all of them if no names are given."""
        if not names:
            return dict(self.generic_feature_adaptors)
        return {name: self.generic_feature_adaptors[name] for name in names if name in self.generic_feature_adaptors}
