

class MaltError(Exception):
    """ Base class for all malt errors"""
    pass

class MaltReadError(MaltError):
    """ Raised when input text cannot be read into a term"""
    pass

class MaltInvalidSymbol(MaltError):
    """ Raised when something other than a symbol is used as a binding name"""
    pass

class MaltUnboundSymbol(MaltError):
    """ Raised when a symbol is used before it is bound"""
    pass

class MaltSyntaxError(MaltError):
    """ Raised when a special form has the wrong shape"""

class MaltArityError(MaltError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MaltTypeError(MaltError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MaltInvocationError(MaltError):
    """ Raised when the head of a list cannot be invoked"""

class MaltArithmeticError(MaltError):
    """ Raised on arithmetic faults such as division by zero"""

class MaltRecursionError(MaltError):
    """ Raised when input nests deeper than the native stack allows"""
