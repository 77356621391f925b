"""
Decomposition of origin-spanning regions. Collaborators (sequence stores, feature stores, assembly mappers) only
understand non-wrapping intervals, so a region that crosses the origin of a circular sequence region is queried as
two linear halves whose results are concatenated in split order.
"""
from typing import Tuple, List, TypeVar

Region = TypeVar("Region")


def split(region: Region) -> Tuple[Region, Region]:
    """Splits ``region`` at the origin of its sequence region.

    The first half runs from ``region.start`` to the end of the sequence region and the second half from position 1
    to ``region.end``. Both halves are linear Regions sharing the sequence region, strand, coordinate system and
    adaptor of ``region``. Any manually attached sequence is not carried over.

    This is unconditional: a region that does not wrap still produces both halves.
    """
    first_half = region.to_linear(start=region.start, end=region.seq_region_length)
    second_half = region.to_linear(start=1, end=region.end)
    return first_half, second_half


def decompose(region: Region) -> List[Region]:
    """Returns the regions to dispatch to a collaborator in place of ``region``, in concatenation order.

    An origin-spanning region is split into its two halves; every other region, including either half of a previous
    split, is dispatched as-is.
    """
    if region.is_wrapping:
        return list(split(region))
    return [region]
