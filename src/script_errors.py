""" Errors raised while running a script. """


class SolitudeError(Exception):
    """ Base class for errors reported against a single script line. """


class UndefinedVariable(SolitudeError):
    def __init__(self, name):
        super().__init__(f"Undefined variable {name}")
        self.name = name


class UndefinedFunction(SolitudeError):
    def __init__(self, name):
        super().__init__(f"Undefined function {name}")
        self.name = name


class CapacityExceeded(SolitudeError):
    pass


class BufferOverflow(CapacityExceeded):
    pass


class MalformedCommand(SolitudeError):
    pass


class MalformedAssignment(MalformedCommand):
    def __init__(self, message="Invalid variable declaration format."):
        super().__init__(message)


class InputReadFailure(SolitudeError):
    def __init__(self, message="Error reading input"):
        super().__init__(message)


class ScriptOpenError(SolitudeError):
    """ The script file could not be opened; ends the run. """
    def __init__(self, path):
        super().__init__(f"Could not open file {path}")
        self.path = path
