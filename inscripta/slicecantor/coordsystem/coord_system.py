from typing import Optional

from inscripta.slicecantor.exc import CoordSystemException

TOP_LEVEL_NAME = "toplevel"


class CoordSystem:
    """
    A named, versioned space of positions, such as ``chromosome:GRCh38`` or ``contig``. Positions on different
    coordinate systems can only be compared after mapping them through an assembly mapper.
    """

    def __init__(
        self,
        name: str,
        version: Optional[str] = None,
        rank: int = 1,
        is_top_level: bool = False,
        is_sequence_level: bool = False,
        is_default: bool = True,
        dbid: Optional[int] = None,
    ):
        """
        Parameters
        ----------
        name
            Name of this coordinate system, e.g. ``chromosome``
        version
            Assembly version, e.g. ``GRCh38``. Versionless coordinate systems (contigs, clones) leave this unset.
        rank
            Rank of this coordinate system; 1 is the highest. The special top-level system has rank 0.
        is_top_level
            Is this the virtual top-level coordinate system?
        is_sequence_level
            Is sequence stored directly on this coordinate system?
        is_default
            Is this the default version of a coordinate system with this name?
        dbid
            Internal identifier of this coordinate system, if it was loaded from a database
        """
        if not name:
            raise CoordSystemException("CoordSystem name must be provided")
        if is_top_level:
            if name != TOP_LEVEL_NAME:
                raise CoordSystemException(f"Top-level CoordSystem must be named {TOP_LEVEL_NAME}, not {name}")
            if is_sequence_level:
                raise CoordSystemException("Top-level CoordSystem cannot be sequence level")
            rank = 0
        elif rank < 1:
            raise CoordSystemException(f"CoordSystem rank must be a positive integer, got {rank}")
        elif name == TOP_LEVEL_NAME:
            raise CoordSystemException(f"Only the top-level CoordSystem may be named {TOP_LEVEL_NAME}")

        self.name = name
        self.version = version or None
        self.rank = rank
        self.is_top_level = is_top_level
        self.is_sequence_level = is_sequence_level
        self.is_default = is_default
        self.dbid = dbid

    def __eq__(self, other):
        if type(other) is not CoordSystem:
            return False
        return self.name == other.name and self.version == other.version

    def __hash__(self):
        return hash((self.name, self.version))

    def __str__(self):
        return f"{self.name}:{self.version}" if self.version else self.name

    def __repr__(self):
        return f"<CoordSystem {str(self)} rank={self.rank}>"
