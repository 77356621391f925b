from typing import Dict, Hashable, List, NamedTuple, Optional, Tuple

from inscripta.slicecantor.exc import InvalidMatrixError


class Entry(NamedTuple):
    """A scored pairing of a source object with a target object."""

    source: Hashable
    target: Hashable
    score: float


class ScoredMappingMatrix:
    """
    Sparse matrix of scores between source and target objects (exons, transcripts, genes) of two releases.
    Sources and targets are identified by their IDs and keep the order in which they were first scored.
    """

    def __init__(self):
        self._scores: Dict[Tuple[Hashable, Hashable], float] = {}
        # dicts with None values act as insertion-ordered sets
        self._targets_by_source: Dict[Hashable, Dict[Hashable, None]] = {}
        self._sources_by_target: Dict[Hashable, Dict[Hashable, None]] = {}

    def __len__(self):
        return len(self._scores)

    def __contains__(self, item: Tuple[Hashable, Hashable]):
        return item in self._scores

    def __repr__(self):
        return (
            f"<ScoredMappingMatrix entries={len(self)} sources={self.get_source_count()} "
            f"targets={self.get_target_count()}>"
        )

    @property
    def size(self) -> int:
        return len(self)

    def add_score(self, source: Hashable, target: Hashable, score: float):
        """Scores a pair, registering the source and target if they are new. An existing score is replaced."""
        self._targets_by_source.setdefault(source, {})[target] = None
        self._sources_by_target.setdefault(target, {})[source] = None
        self._scores[(source, target)] = score

    def set_score(self, source: Hashable, target: Hashable, score: float):
        """Changes the score of a pair that is already in this matrix."""
        if (source, target) not in self._scores:
            raise InvalidMatrixError(f"No entry for source {source} and target {target}")
        self._scores[(source, target)] = score

    def get_score(self, source: Hashable, target: Hashable) -> Optional[float]:
        """Returns the score of a pair, or None if the pair was never scored."""
        return self._scores.get((source, target))

    def has_entry(self, source: Hashable, target: Hashable) -> bool:
        return (source, target) in self._scores

    def get_entry(self, source: Hashable, target: Hashable) -> Optional[Entry]:
        score = self.get_score(source, target)
        if score is None:
            return None
        return Entry(source, target, score)

    def get_targets_for_source(self, source: Hashable) -> List[Hashable]:
        return list(self._targets_by_source.get(source, {}))

    def get_sources_for_target(self, target: Hashable) -> List[Hashable]:
        return list(self._sources_by_target.get(target, {}))

    def get_all_sources(self) -> List[Hashable]:
        return list(self._targets_by_source)

    def get_all_targets(self) -> List[Hashable]:
        return list(self._sources_by_target)

    def get_all_entries(self) -> List[Entry]:
        return [Entry(source, target, score) for (source, target), score in self._scores.items()]

    def get_source_count(self) -> int:
        return len(self._targets_by_source)

    def get_target_count(self) -> int:
        return len(self._sources_by_target)

    def min_score(self) -> Optional[float]:
        return min(self._scores.values()) if self._scores else None

    def max_score(self) -> Optional[float]:
        return max(self._scores.values()) if self._scores else None

    def average_score(self) -> Optional[float]:
        return sum(self._scores.values()) / len(self._scores) if self._scores else None
