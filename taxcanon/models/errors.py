"""Error classes for taxcanon."""

class TaxCanonError(Exception):
    """Base class for taxcanon exceptions."""
    pass

class InputError(TaxCanonError):
    """Raised when there's an issue with input files."""
    pass

class VocabularyError(TaxCanonError):
    """Raised when a value falls outside a closed vocabulary."""
    pass

class UnknownRankError(VocabularyError):
    """Raised when a rank label is not a known NCBI rank."""
    pass

class UnknownNameTypeError(VocabularyError):
    """Raised when a name class is not a known NCBI name type."""
    pass

class TaxonomyError(TaxCanonError):
    """Raised when there's an issue with taxonomy."""
    pass

class DuplicateNodeError(TaxonomyError):
    """Raised when a tax id occurs more than once in the nodes dump."""
    pass

class LineageError(TaxonomyError):
    """Raised when a canonical node has an ancestor of its own rank."""
    pass

class NamingError(TaxCanonError):
    """Raised when there's an issue with resolved names."""
    pass

class MissingNameError(NamingError):
    """Raised when a surviving tax id has no name."""
    pass

class NameSeparatorError(NamingError):
    """Raised when a name contains the output field separator."""
    pass

class DuplicateNameError(NamingError):
    """Raised when two tax ids resolve to the same name."""
    pass
