"""Signal-aware output for the dirtree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes tree lines to a file descriptor or file, stopping on SIGPIPE/SIGINT.

    Text is encoded as UTF-8 and written with ``os.write`` so nothing is held in a
    Python-level buffer when the process is interrupted.

    Attributes:
        file: The file descriptor or path given by the caller.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path, str], encoding: str = "utf-8"):
        """Open the output.

        Args:
            file: A file descriptor (int), or a path to create or truncate.
            encoding: Text encoding for written data.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
        """
        self.file = file
        self.encoding = encoding
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding=encoding)
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text unless an interrupting signal has arrived.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        # Undecodable file names arrive surrogate-escaped and are written back as their raw bytes
        encoded = data.encode(self.encoding, errors="surrogateescape")
        try:
            # os.write may write fewer bytes than requested on pipes
            while encoded:
                written = os.write(self.fd, encoded)
                encoded = encoded[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even when closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
