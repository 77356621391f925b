from inscripta.slicecantor.models.models import (  # noqa: F401
    BaseModel,
    CoordSystemModel,
    RegionModel,
    ProjectionSegmentModel,
    ProjectionModel,
)
