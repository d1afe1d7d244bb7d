class DomainError(ValueError):
    """Input lies outside the domain of a transform (e.g. a probability of 0 or 1)"""


class InvalidParameterError(ValueError):
    """Distribution or formatting parameters violate their constraints"""


class EmptyInputError(ValueError):
    """A collection that must hold values was empty"""


class FileSystemError(OSError):
    """Post scaffolding could not create its directory or write its document"""
