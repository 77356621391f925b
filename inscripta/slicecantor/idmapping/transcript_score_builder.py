"""
Transcript scoring for identifier mapping between two releases.

Transcripts are scored from an exon scoring matrix. First every pair of source and target transcripts sharing at
least one scored exon pair is flagged; then each flagged pair is scored as the length-weighted best exon score of
each transcript, combined over the total length of both transcripts.
"""
import logging
from typing import Iterable, Optional

from inscripta.slicecantor.idmapping.cache import IdMappingCache, MappingSide
from inscripta.slicecantor.idmapping.config import TranscriptScoreBuilderConfig
from inscripta.slicecantor.idmapping.scored_matrix import ScoredMappingMatrix, Entry
from inscripta.slicecantor.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)


class TranscriptScoreBuilder:
    def __init__(self, cache: IdMappingCache, config: Optional[TranscriptScoreBuilderConfig] = None):
        self.cache = cache
        self.config = config if config is not None else TranscriptScoreBuilderConfig()

    def score_transcripts(self, exon_matrix: ScoredMappingMatrix) -> ScoredMappingMatrix:
        """Builds the transcript scoring matrix from exon scores and logs its statistics."""
        ObjectValidation.require_object_has_type(exon_matrix, ScoredMappingMatrix)
        logger.info("Starting transcript scoring")
        matrix = self.build_scores(exon_matrix)

        logger.info(f"Total source transcripts: {self.cache.get_transcript_count(MappingSide.SOURCE)}")
        logger.info(f"Scored source transcripts: {matrix.get_source_count()}")
        logger.info(f"Total target transcripts: {self.cache.get_transcript_count(MappingSide.TARGET)}")
        logger.info(f"Scored target transcripts: {matrix.get_target_count()}")
        self.log_matrix_stats(matrix)
        logger.info("Done with transcript scoring")
        return matrix

    def build_scores(self, exon_matrix: ScoredMappingMatrix) -> ScoredMappingMatrix:
        ObjectValidation.require_object_has_type(exon_matrix, ScoredMappingMatrix)
        flag_matrix = self.flag_matrix_from_exon_scores(exon_matrix)
        return self.score_matrix_from_flag_matrix(flag_matrix, exon_matrix)

    def flag_matrix_from_exon_scores(
        self, exon_matrix: ScoredMappingMatrix, matrix: Optional[ScoredMappingMatrix] = None
    ) -> ScoredMappingMatrix:
        """Flags (with score 1) every source/target transcript pair that shares a scored exon pair."""
        if matrix is None:
            matrix = ScoredMappingMatrix()
        logger.info("Creating flag matrix")
        for source_transcript in self.cache.get_transcripts(MappingSide.SOURCE):
            for source_exon in source_transcript.exons:
                for target_exon_id in exon_matrix.get_targets_for_source(source_exon.id):
                    for target_transcript in self.cache.get_transcripts_by_exon_id(MappingSide.TARGET, target_exon_id):
                        matrix.add_score(source_transcript.id, target_transcript.id, 1)
        return matrix

    def score_matrix_from_flag_matrix(
        self, flag_matrix: ScoredMappingMatrix, exon_matrix: ScoredMappingMatrix
    ) -> ScoredMappingMatrix:
        """Replaces the flags of ``flag_matrix`` with real transcript scores, returned in a new matrix.

        Only exon scores between exons of the two transcripts being compared are considered. The best exon score found
        so far carries over from one exon to the next within a transcript.
        """
        ObjectValidation.require_object_has_type(flag_matrix, ScoredMappingMatrix)
        ObjectValidation.require_object_has_type(exon_matrix, ScoredMappingMatrix)
        threshold = self.config.transcript_score_threshold
        matrix = ScoredMappingMatrix()

        logger.info("Creating score matrix from flag matrix")
        for source_transcript in self.cache.get_transcripts(MappingSide.SOURCE):
            source_exon_ids = {exon.id for exon in source_transcript.exons}
            source_length = source_transcript.length

            for target_transcript_id in flag_matrix.get_targets_for_source(source_transcript.id):
                target_transcript = self.cache.get_transcript(MappingSide.TARGET, target_transcript_id)
                target_exon_ids = {exon.id for exon in target_transcript.exons}
                target_length = target_transcript.length

                source_score = 0
                max_source_score = -1
                for source_exon in source_transcript.exons:
                    for target_exon_id in exon_matrix.get_targets_for_source(source_exon.id):
                        if target_exon_id not in target_exon_ids:
                            continue
                        max_source_score = max(max_source_score, exon_matrix.get_score(source_exon.id, target_exon_id))
                    if max_source_score > 0:
                        source_score += max_source_score * source_exon.length

                target_score = 0
                max_target_score = -1
                for target_exon in target_transcript.exons:
                    for source_exon_id in exon_matrix.get_sources_for_target(target_exon.id):
                        if source_exon_id not in source_exon_ids:
                            continue
                        max_target_score = max(max_target_score, exon_matrix.get_score(source_exon_id, target_exon.id))
                    if max_target_score > 0:
                        target_score += max_target_score * target_exon.length

                if source_length + target_length <= 0:
                    logger.warning(
                        f"Combined length of source ({source_transcript.id}) and target ({target_transcript.id}) "
                        f"transcript is zero"
                    )
                    continue
                if source_score > source_length or target_score > target_length:
                    logger.warning(
                        f"Score > length for source ({source_score} <> {source_length}) "
                        f"or target ({target_score} <> {target_length})"
                    )
                    continue
                transcript_score = (source_score + target_score) / (source_length + target_length)
                if transcript_score > threshold:
                    matrix.add_score(source_transcript.id, target_transcript.id, transcript_score)
        return matrix

    def different_translation_rescore(self, matrix: ScoredMappingMatrix) -> int:
        """Penalizes perfectly scoring transcript pairs whose translations differ, or where only one of the two is
        translated. Returns the number of entries rescored."""
        ObjectValidation.require_object_has_type(matrix, ScoredMappingMatrix)
        rescored = 0
        for entry in sorted(matrix.get_all_entries(), key=lambda x: x.score, reverse=True):
            # only perfect matches are considered
            if entry.score < 1:
                break
            source_transcript = self.cache.get_transcript(MappingSide.SOURCE, entry.source)
            target_transcript = self.cache.get_transcript(MappingSide.TARGET, entry.target)
            if not source_transcript.has_translation and not target_transcript.has_translation:
                continue
            if (
                not source_transcript.has_translation
                or not target_transcript.has_translation
                or source_transcript.translation_seq != target_transcript.translation_seq
            ):
                matrix.set_score(entry.source, entry.target, self.config.different_translation_score)
                rescored += 1
        logger.debug(f"Non-perfect translations on perfect transcripts: {rescored}")
        return rescored

    def non_mapped_gene_rescore(self, matrix: ScoredMappingMatrix, gene_mappings: Iterable[Entry]) -> int:
        """Penalizes transcript pairs whose source gene was not mapped to the gene of the target transcript.
        Returns the number of entries rescored."""
        ObjectValidation.require_object_has_type(matrix, ScoredMappingMatrix)
        gene_lookup = {mapping.source: mapping.target for mapping in gene_mappings}
        rescored = 0
        for entry in matrix.get_all_entries():
            source_gene = self.cache.get_gene_by_transcript_id(MappingSide.SOURCE, entry.source)
            target_gene = self.cache.get_gene_by_transcript_id(MappingSide.TARGET, entry.target)
            mapped_target = gene_lookup.get(source_gene.id)
            if mapped_target is None or mapped_target != target_gene.id:
                matrix.set_score(entry.source, entry.target, entry.score * self.config.non_mapped_gene_penalty)
                rescored += 1
        logger.debug(f"Scored transcripts in non-mapped genes: {rescored}")
        return rescored

    @staticmethod
    def log_matrix_stats(matrix: ScoredMappingMatrix):
        if not len(matrix):
            logger.info("Scoring matrix is empty")
            return
        logger.info(f"Scoring matrix entries: {len(matrix)}")
        logger.info(
            f"Scoring matrix min/max/avg score: {matrix.min_score()}/{matrix.max_score()}/{matrix.average_score()}"
        )
