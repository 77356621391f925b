import warnings
from typing import Optional, List, Dict, Tuple, Union

from Bio.SeqFeature import FeatureLocation
from methodtools import lru_cache

from inscripta.slicecantor.adaptors import DatabaseAdaptor, Attribute
from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.exc import (
    InvalidPositionException,
    MissingAdaptorWarning,
    MissingFeatureAdaptorWarning,
    ImmutableSequenceWarning,
)
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.projection.segment import ProjectionSegment
from inscripta.slicecantor.region.splitter import decompose
from inscripta.slicecantor.sequence import reverse_complement, unknown_sequence
from inscripta.slicecantor.util.object_validation import ObjectValidation

CIRCULAR_ATTRIBUTE_CODE = "circular_seq"


class Region:
    """
    A region of a sequence region (chromosome, plasmid, contig) in a particular coordinate system.

    Coordinates are 1-based and inclusive. ``start == end + 1`` denotes an insertion point between two bases.
    Coordinates below 1 or beyond the sequence region length are permitted; :meth:`constrain_to_region` clips them.

    Regions are immutable. Every resizing or re-orienting operation returns a new Region.

    A Region may hold a :class:`~slicecantor.adaptors.DatabaseAdaptor`. Without one it is detached: its sequence is
    unknown (``N``) unless attached manually, and every feature, attribute or projection lookup returns an empty
    result with a warning.
    """

    def __init__(
        self,
        seq_region_name: str,
        start: int,
        end: int,
        strand: Union[Strand, int, None] = Strand.PLUS,
        seq_region_length: Optional[int] = None,
        coord_system: Optional[CoordSystem] = None,
        sequence: Optional[str] = None,
        adaptor: Optional[DatabaseAdaptor] = None,
    ):
        """
        Parameters
        ----------
        seq_region_name
            Name of the sequence region this Region lies on
        start
            1-based start position
        end
            1-based inclusive end position
        strand
            Strand of this Region on the sequence region. Integers 1 and -1 are accepted.
        seq_region_length
            Total length of the sequence region. Defaults to ``end``.
        coord_system
            Coordinate system of the sequence region
        sequence
            A sequence to attach manually. It is used in place of any sequence the adaptor could provide, and
            prevents the Region from being expanded.
        adaptor
            Data-access collaborators used for sequence, feature, attribute and projection lookups
        """
        ObjectValidation.require_argument(seq_region_name, "seq_region_name")
        ObjectValidation.require_argument(start, "start")
        ObjectValidation.require_argument(end, "end")
        if seq_region_length is None:
            seq_region_length = end
        ObjectValidation.require_positive_length(seq_region_length)

        self.seq_region_name = seq_region_name
        self.start = int(start)
        self.end = int(end)
        self.strand = Strand.coerce(strand)
        self.seq_region_length = int(seq_region_length)
        self.coord_system = coord_system
        self.sequence = sequence
        self.adaptor = adaptor
        self._validate_interval()

    def _validate_interval(self):
        ObjectValidation.require_start_not_after_end(self.start, self.end)

    def _constructor_kwargs(self) -> dict:
        return dict(
            seq_region_name=self.seq_region_name,
            start=self.start,
            end=self.end,
            strand=self.strand,
            seq_region_length=self.seq_region_length,
            coord_system=self.coord_system,
            sequence=self.sequence,
            adaptor=self.adaptor,
        )

    def _replace(self, **overrides) -> "Region":
        """Returns a new Region of the same type with the given fields replaced."""
        kwargs = self._constructor_kwargs()
        kwargs.update(overrides)
        return type(self)(**kwargs)

    def to_linear(self, **overrides) -> "Region":
        """Returns a linear :class:`Region` on the same sequence region with the given fields replaced. A manually
        attached sequence is not carried over unless given explicitly."""
        kwargs = self._constructor_kwargs()
        kwargs["sequence"] = None
        kwargs.update(overrides)
        return Region(**kwargs)

    def __str__(self):
        return f"{self.seq_region_name}:{self.start}-{self.end}:{self.strand}"

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return (
            self.seq_region_name == other.seq_region_name
            and self.start == other.start
            and self.end == other.end
            and self.strand is other.strand
            and self.seq_region_length == other.seq_region_length
            and self.coord_system == other.coord_system
            and self.sequence == other.sequence
        )

    def __hash__(self):
        return hash((self.seq_region_name, self.start, self.end, self.strand, self.seq_region_length))

    def __len__(self):
        return self.length

    @property
    def name(self) -> str:
        """Returns the unique name of this Region, e.g. ``chromosome:GRCh38:X:1000:2000:1``."""
        cs_name = self.coord_system.name if self.coord_system else ""
        cs_version = self.coord_system.version or "" if self.coord_system else ""
        return ":".join(
            [cs_name, cs_version, self.seq_region_name, str(self.start), str(self.end), str(self.strand.value)]
        )

    @property
    def desc(self) -> str:
        cs_name = self.coord_system.name if self.coord_system else ""
        return f"{cs_name} {self.seq_region_name}".strip()

    @property
    def is_insertion(self) -> bool:
        """Is this a zero-length point between two bases?"""
        return self.start == self.end + 1

    @property
    def is_wrapping(self) -> bool:
        """Does this Region cross the origin of its sequence region? Never true for a linear Region."""
        return False

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def midpoint(self) -> float:
        """Mid position of this Region on the sequence region. May fall between two bases."""
        return (self.start + self.end) / 2

    @lru_cache(maxsize=1)
    @property
    def is_circular(self) -> bool:
        """Does the sequence region this Region lies on carry the circular attribute? Looked up once per instance."""
        return len(self.fetch_attributes(CIRCULAR_ATTRIBUTE_CODE)) > 0

    @property
    def seq_region_id(self) -> Optional[int]:
        """Internal identifier of the sequence region, or None if this Region is detached."""
        if self.adaptor is None:
            warnings.warn(MissingAdaptorWarning("Cannot retrieve seq_region_id without attached adaptor"))
            return None
        return self.adaptor.region_adaptor.get_seq_region_id(self)

    def query_regions(self) -> List["Region"]:
        """Non-wrapping regions that together stand in for this Region when querying a collaborator."""
        return decompose(self)

    def fetch_sequence(self) -> str:
        """Returns the sequence of this Region on its own strand.

        A manually attached sequence wins over the adaptor. A detached Region without attached sequence returns
        ``N`` repeated for its length. The sequences of the query regions are joined in split order on either strand.
        """
        if self.is_insertion:
            return ""
        if self.sequence is not None:
            return self.sequence
        if self.adaptor is None:
            return unknown_sequence(self.length)
        return "".join(
            self.adaptor.sequence_adaptor.fetch_by_region_start_end_strand(query_region, 1, None, Strand.PLUS)
            for query_region in self.query_regions()
        )

    def fetch_subsequence(self, start: int, end: int, strand: Union[Strand, int] = Strand.PLUS) -> str:
        """Returns the sequence between two positions relative to this Region.

        Parameters
        ----------
        start
            1-based start, relative to the start of this Region
        end
            1-based inclusive end, relative to the start of this Region
        strand
            Strand relative to this Region

        Positions outside of this Region are padded with ``N`` when the sequence does not come from an adaptor.
        """
        if start == end + 1:
            return ""
        strand = Strand.coerce(strand)
        if self.adaptor is not None and self.sequence is None:
            return self._fetch_subsequence_from_adaptor(start, end, strand)

        if end < start:
            raise InvalidPositionException(f"End ({end}) must not be less than start ({start})")
        seq = self.fetch_sequence()
        length = self.length
        # positions before 1, positions within the region, positions after the region
        left_pad = unknown_sequence(min(end, 0) - start + 1)
        middle = seq[max(start, 1) - 1 : max(min(end, length), 0)]
        right_pad = unknown_sequence(end - max(start - 1, length))
        subseq = left_pad + middle + right_pad
        if strand is Strand.MINUS:
            subseq = reverse_complement(subseq)
        return subseq

    def _fetch_subsequence_from_adaptor(self, start: int, end: int, strand: Strand) -> str:
        if end < start:
            raise InvalidPositionException(f"End ({end}) must not be less than start ({start})")
        return self.adaptor.sequence_adaptor.fetch_by_region_start_end_strand(self, start, end, strand)

    def expand(self, five_prime_expand: int = 0, three_prime_expand: int = 0) -> Optional["Region"]:
        """Returns a resized copy of this Region.

        Positive values move the five prime or three prime end outwards, negative values move it inwards. The ends are
        biological: on the minus strand the five prime end is the numeric end. The result is not clamped to the
        sequence region. Ends that contract past each other are resolved by :meth:`_resolve_crossed_ends`.

        Returns None if a sequence has been attached manually.
        """
        if self.sequence is not None:
            warnings.warn(ImmutableSequenceWarning("Cannot expand a region which has a manually attached sequence"))
            return None
        if self.strand is Strand.PLUS:
            start_shift, end_shift = five_prime_expand, three_prime_expand
        else:
            start_shift, end_shift = three_prime_expand, five_prime_expand
        start, end = self._resolve_crossed_ends(self.start - start_shift, self.end + end_shift, start_shift)
        return self._replace(start=start, end=end)

    def _resolve_crossed_ends(self, start: int, end: int, start_shift: int) -> Tuple[int, int]:
        """Floors a linear Region whose ends crossed to two bases, ending at the new end if the start moved inwards."""
        if start <= end + 1:
            return start, end
        if start_shift < 0:
            return end - 1, end
        return start, start + 1

    def _wrap_position(self, position: int) -> int:
        return position

    def sub_region(self, start: int, end: int, strand: Union[Strand, int] = Strand.PLUS) -> Optional["Region"]:
        """Returns the part of this Region between two positions relative to it, on ``strand`` relative to it.

        Returns None if the requested window does not lie entirely within this Region.
        """
        if start < 1 or start > self.length or end < start or end > self.length:
            return None
        strand = Strand.coerce(strand)
        if self.strand is Strand.PLUS:
            new_start = self.start + start - 1
            new_end = self.start + end - 1
        else:
            new_start = self.end - end + 1
            new_end = self.end - start + 1
        new_sequence = self.fetch_subsequence(start, end, strand) if self.sequence is not None else None
        return self._replace(
            start=self._wrap_position(new_start),
            end=self._wrap_position(new_end),
            strand=self.strand.relative_to(strand),
            sequence=new_sequence,
        )

    def whole_reference_view(self) -> Optional["Region"]:
        """Returns a Region spanning the entire sequence region this Region is on, on the plus strand.

        Returns None if a sequence has been attached manually.
        """
        if self.sequence is not None:
            warnings.warn(
                ImmutableSequenceWarning(
                    "Cannot get the whole sequence region of a region which has a manually attached sequence"
                )
            )
            return None
        return self._replace(start=1, end=self.seq_region_length, strand=Strand.PLUS)

    def constrain_to_region(self) -> List[ProjectionSegment]:
        """Clips this Region to the defined part of its sequence region.

        Returns an empty list if no part of this Region is defined, otherwise a single segment whose
        ``from_start``/``from_end`` are in the numbering of this Region.
        """
        entire_length = self.seq_region_length
        if self.start > entire_length or self.end < 1:
            return []
        left_contract = self.start - 1 if self.start < 1 else 0
        right_contract = entire_length - self.end if self.end > entire_length else 0
        if not (left_contract or right_contract):
            return [ProjectionSegment(1, self.length, self)]

        if self.strand is Strand.PLUS:
            from_start, from_end = 1 - left_contract, self.length + right_contract
        else:
            from_start, from_end = 1 - right_contract, self.length + left_contract
        return [ProjectionSegment(from_start, from_end, self.sub_region(from_start, from_end))]

    def fetch_attributes(self, code: Optional[str] = None) -> List[Attribute]:
        """Attributes of the sequence region this Region lies on, optionally restricted to one code.
        Codes are compared case-insensitively."""
        if self.adaptor is None:
            warnings.warn(MissingAdaptorWarning("Cannot get attributes without an adaptor"))
            return []
        attributes = []
        for query_region in self.query_regions():
            for attribute in self.adaptor.attribute_adaptor.fetch_all_by_region(query_region):
                if code is None or attribute.code.upper() == code.upper():
                    attributes.append(attribute)
        return attributes

    def fetch_features(self, feature_type: str, **filters) -> List:
        """All features of one category overlapping this Region.

        Parameters
        ----------
        feature_type
            Feature category, which must be registered with the adaptor, e.g. ``gene`` or ``exon``
        filters
            Passed through to the feature adaptor, e.g. ``logic_name`` or ``biotype``
        """
        if self.adaptor is None:
            warnings.warn(MissingAdaptorWarning(f"Cannot get {feature_type} features without attached adaptor"))
            return []
        feature_adaptor = self.adaptor.get_feature_adaptor(feature_type)
        if feature_adaptor is None:
            warnings.warn(MissingFeatureAdaptorWarning(f"{feature_type} features not available"))
            return []
        features = []
        for query_region in self.query_regions():
            features.extend(feature_adaptor.fetch_all_by_region(query_region, **filters))
        return features

    def fetch_generic_features(self, *names: str) -> Dict[str, List]:
        """Features from generic feature adaptors registered with the adaptor, keyed by adaptor name. If no names are
        given, every generic feature adaptor is queried."""
        if self.adaptor is None:
            warnings.warn(MissingAdaptorWarning("Cannot retrieve features without attached adaptor"))
            return {}
        features = {}
        for adaptor_name, feature_adaptor in self.adaptor.get_generic_feature_adaptors(*names).items():
            features[adaptor_name] = []
            for query_region in self.query_regions():
                features[adaptor_name].extend(feature_adaptor.fetch_all_by_region(query_region))
        return features

    def project(self, cs_name: str, cs_version: Optional[str] = None) -> List[ProjectionSegment]:
        """Projects this Region onto another coordinate system. See :func:`~slicecantor.projection.project`."""
        # avoid circular imports
        from inscripta.slicecantor.projection.projector import project

        return project(self, cs_name, cs_version)

    def project_to_region(self, target_region: "Region") -> List[ProjectionSegment]:
        """Projects this Region onto one specific Region. See :func:`~slicecantor.projection.project_to_region`."""
        from inscripta.slicecantor.projection.projector import project_to_region

        return project_to_region(self, target_region)

    def to_feature_location(self) -> FeatureLocation:
        """Convert to a BioPython FeatureLocation, which is 0-based and half-open."""
        return FeatureLocation(self.start - 1, self.end, self.strand.value)

    def to_biopython(self) -> FeatureLocation:
        """Provide a shared function signature with CircularRegion"""
        return self.to_feature_location()
