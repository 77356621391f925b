from typing import NamedTuple, TypeVar

Region = TypeVar("Region")


class ProjectionSegment(NamedTuple):
    """
    One piece of a projection. ``from_start`` and ``from_end`` are 1-based positions in the numbering of the region
    that was projected; ``to_region`` is where that piece lies in the target coordinate system. Segments unpack as
    ``(from_start, from_end, to_region)`` triplets.
    """

    from_start: int
    from_end: int
    to_region: Region

    @property
    def length(self) -> int:
        return self.from_end - self.from_start + 1
