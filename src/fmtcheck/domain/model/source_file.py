"""Source file value object."""

from dataclasses import dataclass
from pathlib import Path

from fmtcheck.domain.exceptions.filesystem import ReadError, WriteError

ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class SourceFile:
    """File selected for formatting.

    Identity is the absolute path. Content is not held here:
    the pipeline reads it once per run via read_text().

    Attributes:
        path: Absolute path to the file
        display_path: POSIX path relative to the discovery root
    """

    path: Path
    display_path: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.path.is_absolute():
            raise ValueError(f"path must be absolute, got {self.path}")
        if not self.display_path:
            raise ValueError("display_path must not be empty")

    def read_text(self) -> str:
        """Read full content as UTF-8, without newline translation.

        Raises:
            ReadError: File missing, unreadable or not valid UTF-8
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError as e:
            raise ReadError(self.path, "file not found") from e
        except PermissionError as e:
            raise ReadError(self.path, "permission denied") from e
        except OSError as e:
            raise ReadError(self.path, str(e) or type(e).__name__) from e

        try:
            return data.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise ReadError(self.path, f"encoding error: {e}") from e

    def write_text(self, text: str) -> None:
        """Overwrite file with text encoded as UTF-8, bytes exactly as given.

        Raises:
            WriteError: File or its directory is not writable
        """
        try:
            self.path.write_bytes(text.encode(ENCODING))
        except PermissionError as e:
            raise WriteError(self.path, "permission denied") from e
        except OSError as e:
            raise WriteError(self.path, e.strerror or str(e) or type(e).__name__) from e

    def __str__(self) -> str:
        return self.display_path
