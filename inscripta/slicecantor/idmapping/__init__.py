"""
Scoring of transcripts between two releases, used to carry stable identifiers from a source release to a target
release.
"""
from inscripta.slicecantor.idmapping.scored_matrix import Entry, ScoredMappingMatrix  # noqa: F401
from inscripta.slicecantor.idmapping.cache import (  # noqa: F401
    IdMappingCache,
    MappingExon,
    MappingGene,
    MappingSide,
    MappingTranscript,
)
from inscripta.slicecantor.idmapping.config import TranscriptScoreBuilderConfig  # noqa: F401
from inscripta.slicecantor.idmapping.transcript_score_builder import TranscriptScoreBuilder  # noqa: F401
