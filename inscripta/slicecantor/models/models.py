"""
Data models. These models allow for validation of inputs to SliceCantor objects, acting as a JSON schema for
serializing and deserializing coordinate systems, regions and projections.
"""
from typing import ClassVar, Type, Optional, List

from marshmallow import Schema, validate
from marshmallow_dataclass import dataclass
from dataclasses import field

from inscripta.slicecantor.adaptors import DatabaseAdaptor
from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.projection.segment import ProjectionSegment
from inscripta.slicecantor.region import Region, CircularRegion


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class CoordSystemModel(BaseModel):
    """Data model that allows construction of a :class:`~slicecantor.coordsystem.CoordSystem` object."""

    name: str
    version: Optional[str] = None
    rank: int = field(default=1, metadata={"validate": validate.Range(min=0)})
    is_top_level: bool = False
    is_sequence_level: bool = False
    is_default: bool = True

    def to_coord_system(self) -> CoordSystem:
        return CoordSystem(
            self.name,
            version=self.version,
            rank=self.rank,
            is_top_level=self.is_top_level,
            is_sequence_level=self.is_sequence_level,
            is_default=self.is_default,
        )

    @staticmethod
    def from_coord_system(coord_system: CoordSystem) -> "CoordSystemModel":
        return CoordSystemModel(
            name=coord_system.name,
            version=coord_system.version,
            rank=coord_system.rank,
            is_top_level=coord_system.is_top_level,
            is_sequence_level=coord_system.is_sequence_level,
            is_default=coord_system.is_default,
        )


@dataclass
class RegionModel(BaseModel):
    """Data model that allows construction of a :class:`~slicecantor.region.Region` or
    :class:`~slicecantor.region.CircularRegion` object.

    The data-access adaptor is never serialized; it can be provided when constructing the Region.
    """

    seq_region_name: str
    start: int
    end: int
    strand: Strand = Strand.PLUS
    seq_region_length: Optional[int] = field(default=None, metadata={"validate": validate.Range(min=1)})
    coord_system: Optional[CoordSystemModel] = None
    sequence: Optional[str] = None
    circular: bool = False

    def to_region(self, adaptor: Optional[DatabaseAdaptor] = None) -> Region:
        region_type = CircularRegion if self.circular else Region
        return region_type(
            self.seq_region_name,
            self.start,
            self.end,
            strand=self.strand,
            seq_region_length=self.seq_region_length,
            coord_system=self.coord_system.to_coord_system() if self.coord_system else None,
            sequence=self.sequence,
            adaptor=adaptor,
        )

    @staticmethod
    def from_region(region: Region) -> "RegionModel":
        return RegionModel(
            seq_region_name=region.seq_region_name,
            start=region.start,
            end=region.end,
            strand=region.strand,
            seq_region_length=region.seq_region_length,
            coord_system=CoordSystemModel.from_coord_system(region.coord_system) if region.coord_system else None,
            sequence=region.sequence,
            circular=isinstance(region, CircularRegion),
        )


@dataclass
class ProjectionSegmentModel(BaseModel):
    """Data model of one :class:`~slicecantor.projection.ProjectionSegment`."""

    from_start: int
    from_end: int
    to_region: RegionModel

    def to_projection_segment(self, adaptor: Optional[DatabaseAdaptor] = None) -> ProjectionSegment:
        return ProjectionSegment(self.from_start, self.from_end, self.to_region.to_region(adaptor))

    @staticmethod
    def from_projection_segment(segment: ProjectionSegment) -> "ProjectionSegmentModel":
        return ProjectionSegmentModel(
            from_start=segment.from_start,
            from_end=segment.from_end,
            to_region=RegionModel.from_region(segment.to_region),
        )


@dataclass
class ProjectionModel(BaseModel):
    """Data model of a complete projection."""

    segments: List[ProjectionSegmentModel]

    def to_projection(self, adaptor: Optional[DatabaseAdaptor] = None) -> List[ProjectionSegment]:
        return [segment.to_projection_segment(adaptor) for segment in self.segments]

    @staticmethod
    def from_projection(projection: List[ProjectionSegment]) -> "ProjectionModel":
        return ProjectionModel(segments=[ProjectionSegmentModel.from_projection_segment(x) for x in projection])
