from typing import Optional

from gtree.types import PathType


class GtreeError(Exception):
    """
    Base class for errors raised by gtree.

    Example:
        >>> error = GtreeError("Failed to get current working directory: boom")
        >>> str(error)
        'Failed to get current working directory: boom'
    """

    pass


class TraversalError(GtreeError):
    """
    Exception raised when a tree cannot be generated for the requested root.

    Only the two root preconditions raise this error: the target path must exist and
    it must be a directory. Problems found deeper in the tree (for example a
    subdirectory that cannot be listed) are never reported through this exception.

    Attributes:
        path (Optional[PathType]): The path as the caller supplied it.

    Example:
        >>> error = TraversalError("Path does not exist: missing", path="missing")
        >>> str(error)
        'Path does not exist: missing'
        >>> error.path
        'missing'
    """

    def __init__(self, message: str, path: Optional[PathType] = None) -> None:
        """
        Initialize the exception.

        Args:
            message (str): Description of the failed precondition.
            path (PathType, optional): The offending path, as supplied by the caller.
        """
        self.path = path
        super().__init__(message)

    @classmethod
    def does_not_exist(cls, path: PathType) -> "TraversalError":
        return cls(f"Path does not exist: {path}", path=path)

    @classmethod
    def not_a_directory(cls, path: PathType) -> "TraversalError":
        return cls(f"Path is not a directory: {path}", path=path)
