
class GcdError(ValueError):
    """
    Base class for rejected GCD operands
    """


class OutOfRangeError(GcdError):
    pass


class InvalidArgumentError(GcdError):
    pass
