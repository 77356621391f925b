import warnings
from typing import Tuple, Union

from Bio.SeqFeature import CompoundLocation, FeatureLocation

from inscripta.slicecantor.exc import MissingCoordSystemWarning
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.region.region import Region
from inscripta.slicecantor.util.object_validation import ObjectValidation


class CircularRegion(Region):
    """
    A Region on a circular sequence region, such as a bacterial chromosome or a plasmid.

    Here ``start > end + 1`` is a legal state: the Region crosses the origin, running from ``start`` to the end of the
    sequence region and on from position 1 to ``end``. Anything that needs per-base data from a collaborator splits
    such a Region into two linear halves and concatenates the results.
    """

    def _validate_interval(self):
        ObjectValidation.require_coord_system_not_top_level(self.coord_system)
        if self.coord_system is None:
            warnings.warn(MissingCoordSystemWarning(f"CircularRegion {self} created without coordinate system"))
        if self.is_wrapping:
            ObjectValidation.require_start_within_seq_region(self.start, self.seq_region_length)
            ObjectValidation.require_end_not_before_origin(self.end)

    @property
    def is_wrapping(self) -> bool:
        return self.start > self.end + 1

    @property
    def length(self) -> int:
        if not self.is_wrapping:
            return self.end - self.start + 1
        return (self.seq_region_length - self.start) + self.end + 1

    @property
    def midpoint(self) -> float:
        if not self.is_wrapping:
            return (self.start + self.end) / 2
        arc_to_end = self.seq_region_length - self.start
        arc_from_origin = self.end
        midpoint = self.start + (arc_to_end + arc_from_origin) / 2
        if midpoint > self.seq_region_length:
            midpoint -= self.seq_region_length
        return midpoint

    def _fetch_subsequence_from_adaptor(self, start: int, end: int, strand: Strand) -> str:
        if end >= start:
            return super()._fetch_subsequence_from_adaptor(start, end, strand)
        # the requested window itself crosses the origin
        sequence_adaptor = self.adaptor.sequence_adaptor
        first = sequence_adaptor.fetch_by_region_start_end_strand(self, start, self.seq_region_length, strand)
        second = sequence_adaptor.fetch_by_region_start_end_strand(self, 1, end, strand)
        return first + second

    def _wrap_position(self, position: int) -> int:
        return (position - 1) % self.seq_region_length + 1

    def _resolve_crossed_ends(self, start: int, end: int, start_shift: int) -> Tuple[int, int]:
        """Both ends are wrapped onto the sequence region. Ends that crossed describe an origin-spanning Region."""
        if start == end + 1:
            start = self._wrap_position(start)
            return start, start - 1
        return self._wrap_position(start), self._wrap_position(end)

    def to_feature_location(self) -> Union[FeatureLocation, CompoundLocation]:
        """Convert to a BioPython location. An origin-spanning Region becomes a two-part CompoundLocation whose parts
        are in biological order."""
        if not self.is_wrapping:
            return super().to_feature_location()
        parts = [
            FeatureLocation(self.start - 1, self.seq_region_length, self.strand.value),
            FeatureLocation(0, self.end, self.strand.value),
        ]
        if self.strand is Strand.MINUS:
            parts.reverse()
        return CompoundLocation(parts)
