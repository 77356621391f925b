from typing import NamedTuple, Optional, List, Dict

import pytest

from inscripta.slicecantor.adaptors import (
    Attribute,
    AssemblyMapper,
    AssemblyMapperAdaptor,
    AttributeAdaptor,
    CoordSystemAdaptor,
    DatabaseAdaptor,
    FeatureAdaptor,
    RegionAdaptor,
    SequenceAdaptor,
)
from inscripta.slicecantor.coordsystem import CoordSystem
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.mapper import Coordinate, Gap
from inscripta.slicecantor.projection import ProjectionSegment
from inscripta.slicecantor.region import Region
from inscripta.slicecantor.sequence import reverse_complement

# 20bp circular chromosome; GGGGG at 11-15, TTTTT at 16-20
CIRCULAR_SEQUENCE = "AAAAACCCCCGGGGGTTTTT"
# 30bp linear chromosome
LINEAR_SEQUENCE = "ATGCCCGGGAAATTTCCCGGGAAATTTGCA"


class Feature(NamedTuple):
    name: str
    seq_region_name: str
    start: int
    end: int
    biotype: str


class MappingBlock(NamedTuple):
    seq_region_name: str
    start: int
    end: int
    to_seq_region_id: int
    to_seq_region_name: str
    to_start: int
    to_coord_system: CoordSystem


class InMemorySequenceAdaptor(SequenceAdaptor):
    """Sequence store keyed by sequence region name. Positions past either end wrap around the sequence region."""

    def __init__(self, sequences: Dict[str, str]):
        self.sequences = sequences
        self.calls = []

    def fetch_by_region_start_end_strand(self, region, start=1, end=None, strand=Strand.PLUS):
        self.calls.append((region, start, end, strand))
        if end is None:
            end = region.length
        if region.strand is Strand.PLUS:
            abs_start, abs_end = region.start + start - 1, region.start + end - 1
        else:
            abs_start, abs_end = region.end - end + 1, region.end - start + 1
        seq = self.sequences[region.seq_region_name]
        subseq = "".join(seq[(pos - 1) % len(seq)] for pos in range(abs_start, abs_end + 1))
        if region.strand.relative_to(strand) is Strand.MINUS:
            subseq = reverse_complement(subseq)
        return subseq


class InMemoryFeatureAdaptor(FeatureAdaptor):
    def __init__(self, features: List[Feature]):
        self.features = features
        self.calls = []

    def fetch_all_by_region(self, region, **filters):
        self.calls.append(region)
        return [
            feature
            for feature in self.features
            if feature.seq_region_name == region.seq_region_name
            and feature.start <= region.end
            and feature.end >= region.start
            and all(getattr(feature, key) == value for key, value in filters.items())
        ]


class InMemoryAttributeAdaptor(AttributeAdaptor):
    def __init__(self, attributes: Dict[str, List[Attribute]]):
        self.attributes = attributes
        self.calls = 0

    def fetch_all_by_region(self, region):
        self.calls += 1
        return list(self.attributes.get(region.seq_region_name, []))


class InMemoryCoordSystemAdaptor(CoordSystemAdaptor):
    def __init__(self, coord_systems: List[CoordSystem]):
        self.coord_systems = coord_systems

    def fetch_by_name(self, name, version=None):
        for coord_system in self.coord_systems:
            if coord_system.name != name:
                continue
            if (version is None and coord_system.is_default) or coord_system.version == version:
                return coord_system
        return None


class BlockAssemblyMapper(AssemblyMapper):
    """Maps intervals through ungapped, same-orientation blocks. Anything between blocks is a gap."""

    def __init__(self, blocks: List[MappingBlock]):
        self.blocks = sorted(blocks, key=lambda x: (x.seq_region_name, x.start))

    def map(self, seq_region_name, start, end, strand, coord_system, target_region=None):
        results = []
        cursor = start
        for block in self.blocks:
            if block.seq_region_name != seq_region_name:
                continue
            if target_region is not None and block.to_seq_region_name != target_region.seq_region_name:
                continue
            if block.end < cursor or block.start > end:
                continue
            if block.start > cursor:
                results.append(Gap(cursor, block.start - 1))
            overlap_start = max(cursor, block.start)
            overlap_end = min(end, block.end)
            results.append(
                Coordinate(
                    block.to_seq_region_id,
                    block.to_start + overlap_start - block.start,
                    block.to_start + overlap_end - block.start,
                    strand,
                    block.to_coord_system,
                )
            )
            cursor = overlap_end + 1
        if cursor <= end:
            results.append(Gap(cursor, end))
        return results


class InMemoryAssemblyMapperAdaptor(AssemblyMapperAdaptor):
    def __init__(self, mappers: Dict[tuple, AssemblyMapper]):
        self.mappers = mappers
        self.cache_clears = 0

    def fetch_by_coord_systems(self, cs1, cs2) -> Optional[AssemblyMapper]:
        return self.mappers.get((cs1, cs2))

    def delete_cache(self):
        self.cache_clears += 1


class InMemoryRegionAdaptor(RegionAdaptor):
    """Sequence regions keyed by internal identifier. No sequence region has symlinks."""

    def __init__(self, seq_regions: Dict[int, tuple]):
        self.seq_regions = seq_regions

    def fetch_normalized_region_projection(self, region):
        return [ProjectionSegment(1, region.length, region)]

    def fetch_by_seq_region_id(self, seq_region_id, start, end, strand):
        name, length, coord_system = self.seq_regions[seq_region_id]
        return Region(name, start, end, strand, seq_region_length=length, coord_system=coord_system)

    def get_seq_region_id(self, region):
        for seq_region_id, (name, _, coord_system) in self.seq_regions.items():
            if name == region.seq_region_name and coord_system == region.coord_system:
                return seq_region_id
        return None


@pytest.fixture
def chromosome() -> CoordSystem:
    return CoordSystem("chromosome", "ASM1", rank=1)


@pytest.fixture
def contig() -> CoordSystem:
    return CoordSystem("contig", rank=2, is_sequence_level=True)


@pytest.fixture
def scaffold() -> CoordSystem:
    return CoordSystem("scaffold", rank=3)


@pytest.fixture
def sequence_adaptor() -> InMemorySequenceAdaptor:
    return InMemorySequenceAdaptor({"circ": CIRCULAR_SEQUENCE, "chr1": LINEAR_SEQUENCE})


@pytest.fixture
def gene_adaptor() -> InMemoryFeatureAdaptor:
    return InMemoryFeatureAdaptor(
        [
            Feature("g1", "circ", 1, 4, "protein_coding"),
            Feature("g2", "circ", 15, 17, "lncRNA"),
            Feature("g3", "circ", 8, 9, "protein_coding"),
        ]
    )


@pytest.fixture
def repeat_adaptor() -> InMemoryFeatureAdaptor:
    return InMemoryFeatureAdaptor([Feature("r1", "circ", 19, 20, "repeat")])


@pytest.fixture
def attribute_adaptor() -> InMemoryAttributeAdaptor:
    return InMemoryAttributeAdaptor(
        {"circ": [Attribute("circular_seq", "1"), Attribute("toplevel", "1", name="Top Level")], "chr1": []}
    )


@pytest.fixture
def assembly_mapper_adaptor(chromosome, contig) -> InMemoryAssemblyMapperAdaptor:
    mapper = BlockAssemblyMapper(
        [
            MappingBlock("circ", 1, 10, 2, "ctg1", 1, contig),
            # 11-12 is a gap
            MappingBlock("circ", 13, 20, 3, "ctg2", 101, contig),
            # pseudo-autosomal region that resolves back onto the chromosome
            MappingBlock("chrY", 1, 30, 4, "chrX", 1, chromosome),
        ]
    )
    return InMemoryAssemblyMapperAdaptor({(chromosome, contig): mapper, (chromosome, chromosome): mapper})


@pytest.fixture
def database_adaptor(
    chromosome,
    contig,
    scaffold,
    sequence_adaptor,
    gene_adaptor,
    repeat_adaptor,
    attribute_adaptor,
    assembly_mapper_adaptor,
) -> DatabaseAdaptor:
    return DatabaseAdaptor(
        region_adaptor=InMemoryRegionAdaptor(
            {
                1: ("circ", 20, chromosome),
                2: ("ctg1", 10, contig),
                3: ("ctg2", 110, contig),
                4: ("chrX", 30, chromosome),
                5: ("chr1", 30, chromosome),
            }
        ),
        sequence_adaptor=sequence_adaptor,
        attribute_adaptor=attribute_adaptor,
        coord_system_adaptor=InMemoryCoordSystemAdaptor([chromosome, contig, scaffold]),
        assembly_mapper_adaptor=assembly_mapper_adaptor,
        feature_adaptors={"gene": gene_adaptor},
        generic_feature_adaptors={"repeat": repeat_adaptor},
    )
