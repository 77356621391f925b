from inscripta.slicecantor.mapper.results import (  # noqa: F401
    Coordinate,
    Gap,
    MappingResult,
    MappingResultType,
)
