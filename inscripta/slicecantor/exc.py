class SliceCantorException(Exception):
    """
    Base exception class for SliceCantor.
    """

    pass


class InvalidStrandException(SliceCantorException):
    """
    Raised when a strand is not one of +1 or -1.
    """

    pass


class InvalidPositionException(SliceCantorException):
    """
    Raised when a position or relative interval is outside of a valid range for the operation being performed.
    """

    pass


class RegionException(SliceCantorException):
    """
    Raised when a Region constructor is given invalid inputs, such as a missing sequence region name or a
    non-positive sequence region length.
    """

    pass


class CoordSystemException(SliceCantorException):
    """
    Raised when a CoordSystem constructor is given invalid inputs.
    """

    pass


class UnknownCoordSystemException(CoordSystemException):
    """
    Raised when a projection is requested onto a coordinate system that cannot be resolved.
    """

    pass


class ValidationException(SliceCantorException):
    """
    Raised when object constructors are given invalid inputs that are not RegionExceptions.
    """

    pass


class InvalidMatrixError(SliceCantorException):
    """
    Raised when a scoring matrix operation is given invalid input.
    """

    pass


class MissingAdaptorWarning(UserWarning):
    """
    Emitted when an operation that requires a data-access adaptor is performed on a detached Region.
    """

    pass


class MissingCoordSystemWarning(UserWarning):
    """
    Emitted when a Region is created, or projected, without a coordinate system.
    """

    pass


class MissingFeatureAdaptorWarning(UserWarning):
    """
    Emitted when no feature adaptor is registered for a requested feature type.
    """

    pass


class ImmutableSequenceWarning(UserWarning):
    """
    Emitted when a resizing operation is attempted on a Region that carries a manually attached sequence.
    """

    pass
