import pytest
from Bio.SeqFeature import CompoundLocation

from inscripta.slicecantor.coordsystem import CoordSystem, TOP_LEVEL_NAME
from inscripta.slicecantor.exc import RegionException, InvalidPositionException, MissingCoordSystemWarning
from inscripta.slicecantor.location.strand import Strand
from inscripta.slicecantor.projection import ProjectionSegment
from inscripta.slicecantor.region import Region, CircularRegion

CHROMOSOME = CoordSystem("chromosome", "ASM1")


class TestCircularRegion:
    @pytest.mark.parametrize(
        "start,end,seq_region_length",
        [
            # starts past the end of the sequence region
            (60, 5, 50),
            # ends before the origin at a non-positive length
            (50, -5, 50),
            # ends before the origin with a positive length
            (18, -1, 20),
        ],
    )
    def test_init_invalid_wrap(self, start, end, seq_region_length):
        with pytest.raises(InvalidPositionException):
            CircularRegion("plasmid", start, end, seq_region_length=seq_region_length, coord_system=CHROMOSOME)

    def test_init_top_level(self):
        with pytest.raises(RegionException):
            CircularRegion(
                "plasmid", 1, 10, seq_region_length=50, coord_system=CoordSystem(TOP_LEVEL_NAME, is_top_level=True)
            )

    def test_init_missing_coord_system(self):
        with pytest.warns(MissingCoordSystemWarning):
            CircularRegion("plasmid", 1, 10, seq_region_length=50)

    @pytest.mark.parametrize(
        "start,end,seq_region_length,expected_length,expected_wrapping",
        [
            (999_990, 10, 1_000_000, 21, True),
            (48, 5, 50, 8, True),
            (50, 1, 50, 2, True),
            (10, 20, 50, 11, False),
            (500, 499, 1_000_000, 0, False),
        ],
    )
    def test_length(self, start, end, seq_region_length, expected_length, expected_wrapping):
        region = CircularRegion("plasmid", start, end, seq_region_length=seq_region_length, coord_system=CHROMOSOME)
        assert region.length == expected_length
        assert len(region) == expected_length
        assert region.is_wrapping is expected_wrapping

    @pytest.mark.parametrize(
        "start,end,seq_region_length,expected",
        [
            (10, 20, 50, 15),
            (999_990, 10, 1_000_000, 1_000_000),
            (45, 15, 50, 5),
            (40, 4, 50, 47),
        ],
    )
    def test_midpoint(self, start, end, seq_region_length, expected):
        region = CircularRegion("plasmid", start, end, seq_region_length=seq_region_length, coord_system=CHROMOSOME)
        assert region.midpoint == expected

    def test_insertion_point(self):
        region = CircularRegion("plasmid", 500, 499, seq_region_length=1_000_000, coord_system=CHROMOSOME)
        assert region.is_insertion
        assert region.fetch_sequence() == ""

    def test_fetch_sequence_detached(self):
        region = CircularRegion("plasmid", 48, 5, seq_region_length=50, coord_system=CHROMOSOME)
        assert region.fetch_sequence() == "N" * 8

    @pytest.mark.parametrize(
        "strand,expected",
        [
            (Strand.PLUS, "GGTTTTTAA"),
            (Strand.MINUS, "AAAAACCTT"),
        ],
    )
    def test_fetch_sequence_adaptor(self, database_adaptor, sequence_adaptor, chromosome, strand, expected):
        region = CircularRegion(
            "circ", 14, 2, strand, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor
        )
        assert region.fetch_sequence() == expected
        # one fetch per half
        assert len(sequence_adaptor.calls) == 2

    @pytest.mark.parametrize("strand", [Strand.PLUS, Strand.MINUS])
    def test_fetch_sequence_concatenates_halves(self, database_adaptor, chromosome, strand):
        region = CircularRegion(
            "circ", 14, 2, strand, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor
        )
        first = Region("circ", 14, 20, strand, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        second = Region("circ", 1, 2, strand, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        # split order on either strand
        assert region.fetch_sequence() == first.fetch_sequence() + second.fetch_sequence()

    def test_fetch_sequence_non_wrapping(self, database_adaptor, sequence_adaptor, chromosome):
        region = CircularRegion("circ", 4, 7, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        assert region.fetch_sequence() == "AACC"
        assert len(sequence_adaptor.calls) == 1

    def test_fetch_subsequence_adaptor(self, database_adaptor, chromosome):
        region = CircularRegion("circ", 14, 2, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        assert region.fetch_subsequence(1, 9) == "GGTTTTTAA"
        assert region.fetch_subsequence(6, 9) == "TTAA"

    def test_fetch_subsequence_adaptor_wrapped_window(self, database_adaptor, sequence_adaptor, chromosome):
        region = CircularRegion("circ", 14, 2, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        region.fetch_subsequence(8, 2)
        assert [call[1:] for call in sequence_adaptor.calls] == [(8, 20, Strand.PLUS), (1, 2, Strand.PLUS)]

    def test_fetch_subsequence_detached(self):
        region = CircularRegion("plasmid", 48, 2, seq_region_length=50, coord_system=CHROMOSOME, sequence="ACGTA")
        assert region.fetch_subsequence(2, 4) == "CGT"
        assert region.fetch_subsequence(4, 7) == "TANN"
        with pytest.raises(InvalidPositionException):
            region.fetch_subsequence(4, 2)

    @pytest.mark.parametrize(
        "start,end,expected_start,expected_end",
        [
            (1, 21, 999_990, 10),
            (12, 21, 1, 10),
            (1, 11, 999_990, 1_000_000),
            (5, 15, 999_994, 4),
        ],
    )
    def test_sub_region(self, start, end, expected_start, expected_end):
        region = CircularRegion("chrom", 999_990, 10, seq_region_length=1_000_000, coord_system=CHROMOSOME)
        sub = region.sub_region(start, end)
        assert type(sub) is CircularRegion
        assert (sub.start, sub.end) == (expected_start, expected_end)
        assert sub.length == end - start + 1

    def test_sub_region_minus(self):
        region = CircularRegion(
            "chrom", 999_990, 10, Strand.MINUS, seq_region_length=1_000_000, coord_system=CHROMOSOME
        )
        sub = region.sub_region(1, 10)
        assert (sub.start, sub.end, sub.strand) == (1, 10, Strand.MINUS)

    @pytest.mark.parametrize("strand", [Strand.PLUS, Strand.MINUS])
    def test_sub_region_round_trip(self, strand):
        region = CircularRegion("chrom", 999_990, 10, strand, seq_region_length=1_000_000, coord_system=CHROMOSOME)
        assert region.sub_region(1, region.length) == region

    def test_expand(self):
        region = CircularRegion("chrom", 200, 300, Strand.MINUS, seq_region_length=1_000_000, coord_system=CHROMOSOME)
        expanded = region.expand(100, 100)
        assert type(expanded) is CircularRegion
        assert (expanded.start, expanded.end, expanded.strand) == (100, 400, Strand.MINUS)

    def test_expand_inverted(self):
        # crossing deltas are not clamped; on a circular sequence region the result wraps
        expanded = CircularRegion("plasmid", 10, 20, seq_region_length=50, coord_system=CHROMOSOME).expand(-10, -10)
        assert (expanded.start, expanded.end) == (20, 10)
        assert expanded.is_wrapping
        assert expanded.length == 41

    @pytest.mark.parametrize(
        "start,end,five_prime,three_prime,expected_start,expected_end,expected_wrapping",
        [
            # contracting the start past the origin
            (48, 5, -3, 0, 1, 5, False),
            # contracting the end back before the origin
            (48, 5, 0, -5, 48, 50, False),
            # expanding across the origin
            (3, 10, 5, 0, 48, 10, True),
            (40, 48, 0, 7, 40, 5, True),
            # insertion point at the origin
            (1, 5, 0, -5, 1, 0, False),
        ],
    )
    def test_expand_wraps_positions(
        self, start, end, five_prime, three_prime, expected_start, expected_end, expected_wrapping
    ):
        region = CircularRegion("plasmid", start, end, seq_region_length=50, coord_system=CHROMOSOME)
        expanded = region.expand(five_prime, three_prime)
        assert (expanded.start, expanded.end) == (expected_start, expected_end)
        assert expanded.is_wrapping is expected_wrapping
        assert expanded.length == region.length + five_prime + three_prime

    def test_whole_reference_view(self):
        region = CircularRegion("plasmid", 48, 5, Strand.MINUS, seq_region_length=50, coord_system=CHROMOSOME)
        assert region.whole_reference_view() == CircularRegion(
            "plasmid", 1, 50, seq_region_length=50, coord_system=CHROMOSOME
        )

    def test_constrain_to_region(self):
        region = CircularRegion("plasmid", 48, 5, seq_region_length=50, coord_system=CHROMOSOME)
        assert region.constrain_to_region() == [ProjectionSegment(1, 8, region)]

    def test_equals(self):
        circular = CircularRegion("plasmid", 1, 10, seq_region_length=50, coord_system=CHROMOSOME)
        linear = Region("plasmid", 1, 10, seq_region_length=50, coord_system=CHROMOSOME)
        assert circular != linear
        assert circular == CircularRegion("plasmid", 1, 10, seq_region_length=50, coord_system=CHROMOSOME)

    def test_fetch_features(self, database_adaptor, gene_adaptor, chromosome):
        region = CircularRegion("circ", 14, 2, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        assert [x.name for x in region.fetch_features("gene")] == ["g2", "g1"]
        assert [(x.start, x.end) for x in gene_adaptor.calls] == [(14, 20), (1, 2)]

    def test_fetch_features_non_wrapping(self, database_adaptor, gene_adaptor, chromosome):
        region = CircularRegion("circ", 3, 9, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        features = region.fetch_features("gene")
        assert len(gene_adaptor.calls) == 1
        assert features == gene_adaptor.fetch_all_by_region(region)

    def test_fetch_generic_features(self, database_adaptor, chromosome):
        region = CircularRegion("circ", 19, 1, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        assert [x.name for x in region.fetch_generic_features("repeat")["repeat"]] == ["r1"]

    def test_fetch_attributes(self, database_adaptor, chromosome):
        region = CircularRegion("circ", 14, 2, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        # the attributes of both halves are concatenated
        assert [x.code for x in region.fetch_attributes("circular_seq")] == ["circular_seq", "circular_seq"]

    def test_is_circular_memoized(self, database_adaptor, attribute_adaptor, chromosome):
        region = CircularRegion("circ", 3, 9, seq_region_length=20, coord_system=chromosome, adaptor=database_adaptor)
        assert region.is_circular
        assert region.is_circular
        assert attribute_adaptor.calls == 1

    def test_to_feature_location(self):
        region = CircularRegion("plasmid", 14, 2, seq_region_length=20, coord_system=CHROMOSOME)
        loc = region.to_feature_location()
        assert isinstance(loc, CompoundLocation)
        assert [(part.start, part.end, part.strand) for part in loc.parts] == [(13, 20, 1), (0, 2, 1)]

    def test_to_feature_location_minus(self):
        region = CircularRegion("plasmid", 14, 2, Strand.MINUS, seq_region_length=20, coord_system=CHROMOSOME)
        loc = region.to_biopython()
        assert [(part.start, part.end, part.strand) for part in loc.parts] == [(0, 2, -1), (13, 20, -1)]

    def test_to_feature_location_non_wrapping(self):
        loc = CircularRegion("plasmid", 5, 10, seq_region_length=20, coord_system=CHROMOSOME).to_feature_location()
        assert (loc.start, loc.end, loc.strand) == (4, 10, 1)
