"""Exam Store - Reads and writes exam files in the exam directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..exceptions import ExamFormatError, ExamNotFoundError, ExamPrepError
from ..models.schemas import Exam, load_exam_data
from ..validators import validate_file_path

logger = logging.getLogger(__name__)


class ExamStore:
    """Exam files on disk.

    Each exam is one JSON file in the exam directory:

        {"name": "...", "questions": [{"kind": ..., "prompt": ...,
          "choices": [...], "answer": [...], "explanation": ..., "refs": [...]}]}

    Example:
        >>> store = ExamStore(Path("assets"))
        >>> store.ensure_directory()
        >>> store.list_exams()
        ['linux_basics.json']
        >>> exam = store.load_exam("linux_basics.json")
    """

    EXAM_SUFFIX = ".json"

    def __init__(self, directory: Path):
        """Create a store rooted at an exam directory.

        Args:
            directory: Directory holding exam files (created on demand)
        """
        self.directory = Path(directory)

    def ensure_directory(self) -> bool:
        """Create the exam directory if it does not exist yet.

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            ExamPrepError: If the directory cannot be created
        """
        if self.directory.is_dir():
            logger.debug(f"Exam directory already exists: {self.directory}")
            return False

        try:
            self.directory.mkdir(parents=True)
        except FileExistsError as e:
            raise ExamPrepError(
                message=f"{self.directory} exists and is not a directory",
                details={"directory": str(self.directory)},
            ) from e
        except OSError as e:
            logger.error(f"Could not create exam directory {self.directory}: {e}")
            raise ExamPrepError(
                message=f"Could not create exam directory {self.directory}: {e}",
                details={"directory": str(self.directory), "error": str(e)},
            ) from e

        logger.info(f"Created exam directory: {self.directory}")
        return True

    def list_exams(self) -> list[str]:
        """Return exam file names in the directory, sorted."""
        if not self.directory.is_dir():
            return []
        return sorted(
            path.name
            for path in self.directory.iterdir()
            if path.is_file() and path.suffix == self.EXAM_SUFFIX
        )

    def resolve(self, filename: str) -> Path:
        """Resolve a file name inside the exam directory."""
        return validate_file_path(filename.strip(), self.directory)

    def load_exam(self, filename: str) -> Exam:
        """Read, deserialize and validate an exam file.

        Args:
            filename: File name relative to the exam directory

        Returns:
            Validated Exam

        Raises:
            ExamNotFoundError: If the file does not exist
            ExamFormatError: If the file is unreadable or not a JSON object
            ValidationError: If the exam violates a structural invariant
        """
        path = self.resolve(filename)
        if not path.is_file():
            logger.error(f"Exam not found: {path}")
            raise ExamNotFoundError(
                message=f"Unable to open exam file {filename!r}",
                details={"path": str(path)},
            )

        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Error parsing exam {path}: {e}")
            raise ExamFormatError(
                message=f"Error parsing exam file {filename!r}: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e
        except OSError as e:
            logger.error(f"Error reading exam {path}: {e}")
            raise ExamFormatError(
                message=f"Error reading exam file {filename!r}: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        if not isinstance(data, dict):
            logger.error(f"Exam {path} is not a JSON object")
            raise ExamFormatError(
                message=f"Exam file {filename!r} must contain a JSON object",
                details={"path": str(path), "type": type(data).__name__},
            )

        exam = load_exam_data(data)
        logger.info(f"Loaded exam {exam.name!r} ({exam.question_count} questions) from {path}")
        return exam

    def save_exam(self, exam: Exam, filename: str) -> Path:
        """Write an exam as JSON into the exam directory.

        Args:
            exam: Exam to write
            filename: Target file name relative to the exam directory

        Returns:
            Path of the written file
        """
        self.ensure_directory()
        path = self.resolve(filename)
        with path.open("w", encoding="utf-8") as f:
            json.dump(exam.to_dict(), f, ensure_ascii=False, indent=2)
            f.write("\n")

        logger.info(f"Exam saved: {path}")
        return path
