"""Input validators for exam file names."""

from pathlib import Path

from .exceptions import InvalidInputError, PathTraversalError


def validate_filename(filename: str) -> bool:
    """Validate an exam file name typed by the user.

    Returns True if valid, raises InvalidInputError if invalid.
    """
    if not filename or not filename.strip():
        raise InvalidInputError(message="File name must not be empty")

    # Prevent path traversal
    if ".." in filename or filename.startswith("/") or filename.startswith("\\"):
        raise PathTraversalError(
            message="File name must stay inside the exam directory",
            details={"filename": filename[:50]},
        )

    # Prevent absolute paths
    if ":" in filename:  # Windows drive letters
        raise PathTraversalError(
            message="Absolute paths are not allowed",
            details={"filename": filename[:50]},
        )

    return True


def validate_file_path(file_path: str, base_path: Path) -> Path:
    """Validate and resolve a file path inside a base directory.

    Args:
        file_path: File path to validate
        base_path: Base directory the file must be within

    Returns:
        Resolved Path if valid

    Raises:
        PathTraversalError if path escapes base directory
    """
    validate_filename(file_path)
    try:
        resolved = (base_path / file_path).resolve()
        base_resolved = base_path.resolve()
    except (ValueError, OSError) as e:
        raise InvalidInputError(
            message="Invalid file path",
            details={"path": file_path[:100], "error": str(e)},
        ) from e

    if not resolved.is_relative_to(base_resolved) or resolved == base_resolved:
        raise PathTraversalError(
            message="Access outside the exam directory",
            details={"path": file_path[:100], "base": str(base_path)},
        )

    return resolved
