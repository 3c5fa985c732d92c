# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for makertags

Formatting itself never raises: unknown tags resolve to a fallback
descriptor and malformed values are printed raw. The exceptions below
cover integration mistakes made by the caller.

Copyright 2025 DNAi inc.
"""


class MakerTagsError(Exception):
    """
    Base exception for all makertags errors.

    All makertags exceptions inherit from this class, allowing
    catch-all error handling for any makertags-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class UnsupportedDirectoryError(MakerTagsError):
    """
    Raised when a directory id has no tag registry.

    This exception is raised when:
    - The id is a valid IFD id owned by another component (e.g. IFD0)
    - The id is not an IFD id at all
    - A group name does not match any known directory
    """
    pass


class InvalidTagError(MakerTagsError):
    """
    Raised when a tag is requested by a name the directory does not know.

    Lookups by numeric id never raise; they fall back to the
    directory's unknown-tag descriptor instead.
    """
    pass


class ValueDecodeError(MakerTagsError):
    """
    Raised when raw input cannot be turned into a Value.

    This exception is raised when:
    - The byte length is not a multiple of the element size
    - A textual element is not a number or a num/den rational
    - The type id is not a known TIFF type
    """
    pass
