"""
Results returned by an :class:`~slicecantor.adaptors.AssemblyMapper`. Each result covers a contiguous piece of the
interval that was mapped, in order, and is either a resolved :class:`Coordinate` or an unmapped :class:`Gap`.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.location.strand import Strand


class MappingResultType(str, Enum):
    COORDINATE = "coordinate"
    GAP = "gap"


@dataclass(frozen=True)
class Coordinate:
    """A piece of the query interval resolved onto a sequence region of ``coord_system``."""

    result_type: ClassVar[MappingResultType] = MappingResultType.COORDINATE

    seq_region_id: int
    start: int
    end: int
    strand: Strand
    coord_system: CoordSystem

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def is_gap(self) -> bool:
        return False


@dataclass(frozen=True)
class Gap:
    """A piece of the query interval that has no mapping. Coordinates are in the query coordinate system."""

    result_type: ClassVar[MappingResultType] = MappingResultType.GAP

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def is_gap(self) -> bool:
        return True


MappingResult = Union[Coordinate, Gap]
