

class JamError(Exception):
    """ Base class for all Jam errors"""
    pass

class JamSyntaxError(JamError):
    """ Raised by the reader when a program is malformed"""

class JamEvaluationError(JamError):
    """ Raised when evaluation of a well-formed program fails"""

class JamUnboundVariable(JamEvaluationError):
    """ Raised when a variable has no binding in the current environment"""

class JamForwardReference(JamEvaluationError):
    """ Raised when a binding is read before its definition is installed"""

class JamArityError(JamEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class JamTypeError(JamEvaluationError):
    """ Raised when an operation is applied to a value of the wrong type"""

class JamDivideByZero(JamEvaluationError):
    """ Raised when an integer is divided by zero"""
