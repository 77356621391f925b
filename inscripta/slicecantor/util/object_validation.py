from inscripta.slicecantor.exc import RegionException, InvalidPositionException


class ObjectValidation:
    @staticmethod
    def require_argument(value, name: str):
        if value is None:
            raise RegionException(f"{name} argument is required")

    @staticmethod
    def require_positive_length(seq_region_length: int):
        if seq_region_length <= 0:
            raise RegionException(f"seq_region_length must be > 0, got {seq_region_length}")

    @staticmethod
    def require_start_not_after_end(start: int, end: int):
        if start > end + 1:
            raise InvalidPositionException(f"Start ({start}) must be less than or equal to end ({end}) + 1")

    @staticmethod
    def require_coord_system_not_top_level(coord_system):
        if coord_system is not None and coord_system.is_top_level:
            raise RegionException("Cannot create a circular region on the top-level CoordSystem")

    @staticmethod
    def require_start_within_seq_region(start: int, seq_region_length: int):
        if start > seq_region_length:
            raise InvalidPositionException(
                f"Start of an origin-spanning region ({start}) must be <= seq_region_length ({seq_region_length})"
            )

    @staticmethod
    def require_end_not_before_origin(end: int):
        if end < 0:
            raise InvalidPositionException(f"End of an origin-spanning region ({end}) must be >= 0")

    @staticmethod
    def require_object_has_type(obj, required_type):
        if type(obj) is not required_type:
            raise TypeError("Object must have type {}".format(required_type))
