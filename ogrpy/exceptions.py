'''
Custom exception classes, for finer grained error handling
'''


class OGRpyException(Exception):
    '''Parent class for all our exceptions'''
    pass


class InvalidParameterError(OGRpyException):
    '''Raised when an order, length, depth or id is outside the range a routine is defined for'''
    pass

class InvalidRulerError(OGRpyException):
    '''Raised when the marks of a ruler are not positive, strictly increasing integers'''
    pass

class NotGolombError(InvalidRulerError):
    '''Raised when a `GolombRuler` is built from marks that repeat a distance'''
    pass

class IndexOverflowError(OGRpyException):
    '''Raised when a ruler's id does not fit in `ID_BITS` bits and an id was explicitly required'''
    pass

class ImplementationError(OGRpyException):
    '''Raised when an internal invariant of a construction algorithm is broken'''
    pass
