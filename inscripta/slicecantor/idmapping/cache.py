"""
In-memory lookup of the genes, transcripts and exons of the two releases being mapped. Both releases are held in the
same cache, distinguished by :class:`MappingSide`.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, List, Optional, Iterable


class MappingSide(str, Enum):
    SOURCE = "source"
    TARGET = "target"


@dataclass(frozen=True)
class MappingExon:
    id: Hashable
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass
class MappingTranscript:
    id: Hashable
    exons: List[MappingExon] = field(default_factory=list)
    translation_seq: Optional[str] = None

    @property
    def length(self) -> int:
        """Sum of the exon lengths."""
        return sum(exon.length for exon in self.exons)

    @property
    def has_translation(self) -> bool:
        return self.translation_seq is not None


@dataclass
class MappingGene:
    id: Hashable
    transcripts: List[MappingTranscript] = field(default_factory=list)


class IdMappingCache:
    def __init__(self):
        self._transcripts_by_id: Dict[MappingSide, Dict[Hashable, MappingTranscript]] = {
            side: {} for side in MappingSide
        }
        self._transcripts_by_exon_id: Dict[MappingSide, Dict[Hashable, List[MappingTranscript]]] = {
            side: {} for side in MappingSide
        }
        self._genes_by_transcript_id: Dict[MappingSide, Dict[Hashable, MappingGene]] = {
            side: {} for side in MappingSide
        }

    def add_genes(self, side: MappingSide, genes: Iterable[MappingGene]):
        """Indexes genes, and their transcripts and exons, for one side of the mapping."""
        side = MappingSide(side)
        for gene in genes:
            for transcript in gene.transcripts:
                self._transcripts_by_id[side][transcript.id] = transcript
                self._genes_by_transcript_id[side][transcript.id] = gene
                for exon in transcript.exons:
                    self._transcripts_by_exon_id[side].setdefault(exon.id, []).append(transcript)

    def get_transcripts(self, side: MappingSide) -> List[MappingTranscript]:
        return list(self._transcripts_by_id[MappingSide(side)].values())

    def get_transcript(self, side: MappingSide, transcript_id: Hashable) -> Optional[MappingTranscript]:
        return self._transcripts_by_id[MappingSide(side)].get(transcript_id)

    def get_transcripts_by_exon_id(self, side: MappingSide, exon_id: Hashable) -> List[MappingTranscript]:
        return list(self._transcripts_by_exon_id[MappingSide(side)].get(exon_id, []))

    def get_gene_by_transcript_id(self, side: MappingSide, transcript_id: Hashable) -> Optional[MappingGene]:
        return self._genes_by_transcript_id[MappingSide(side)].get(transcript_id)

    def get_transcript_count(self, side: MappingSide) -> int:
        return len(self._transcripts_by_id[MappingSide(side)])
