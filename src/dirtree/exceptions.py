class DirtreeError(Exception):
    """
    Base class for fatal errors raised while preparing a directory tree.

    Only problems with the root path are fatal. Failures to list a directory below the
    root are absorbed by the traversal and never surface as a DirtreeError.
    """

    pass


class RootNotFoundError(DirtreeError, FileNotFoundError):
    """
    Exception raised when the root path passed to the traversal does not exist.

    Attributes:
        path (str): The root path as given by the caller.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Root path does not exist: /no/such/dir'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Root path does not exist: {path}")


class RootNotADirectoryError(DirtreeError, NotADirectoryError):
    """
    Exception raised when the root path exists but is not a directory.

    Attributes:
        path (str): The root path as given by the caller.

    Example:
        >>> error = RootNotADirectoryError("/etc/hostname")
        >>> str(error)
        'Root path is not a directory: /etc/hostname'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Root path is not a directory: {path}")


class PathResolutionError(DirtreeError):
    """
    Exception raised when the root path exists but cannot be canonicalized.

    This covers failures such as permission problems on an ancestor directory or a
    symlink loop in the root path itself.

    Attributes:
        path (str): The path that could not be resolved.
        reason (str): Description of the underlying operating system error.

    Example:
        >>> error = PathResolutionError("/some/path", "Permission denied")
        >>> str(error)
        'Cannot resolve path /some/path: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path {path}: {reason}")


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    is requested for a summary. The tiktoken package is an optional dependency that must be
    explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        """
        Initialize the exception with an informative error message.

        Args:
            message (str, optional): Base error message. Defaults to "Tokenizer (tiktoken) is not installed."
                Installation instructions will be appended to this message.
        """
        self.message = (
            f"{message} To enable token counting, install dirtree with the 'token_counting' "
            "extra: 'pip install dirtree[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass
