"""Exam Schemas - Pydantic models for exams, questions and grading results."""

import logging
from typing import Annotated, Any, Literal, NoReturn, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from .enums import QuestionKind

logger = logging.getLogger(__name__)


class FrozenModel(BaseModel):
    """Immutable base: nothing is mutated after an exam is loaded."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# =============================================================================
# QUESTIONS
# =============================================================================


class _QuestionBase(FrozenModel):
    """Fields shared by every question kind."""

    prompt: str = Field(..., description="Question text shown to the user")
    answer: frozenset[str] = Field(..., description="Accepted answers (order never matters)")
    explanation: str = Field(default="", description="Shown after answering, empty means none")
    refs: tuple[str, ...] = Field(default=(), description="Reference strings for review")

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_as_collection(cls, value: Any) -> Any:
        # older exam files store a single answer as a bare string
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("explanation", mode="before")
    @classmethod
    def _explanation_default(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("refs", mode="before")
    @classmethod
    def _refs_default(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be empty")
        return value


class _ChoiceQuestion(_QuestionBase):
    """Question answered by picking from a fixed list of choices."""

    choices: tuple[str, ...] = Field(..., description="Selectable options, in display order")

    @field_validator("choices")
    @classmethod
    def _choices_unique(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("choices must not be empty")

        seen: set[str] = set()
        duplicates = []
        for choice in value:
            if choice in seen:
                duplicates.append(choice)
            seen.add(choice)
        if duplicates:
            raise ValueError(f"duplicate choices: {duplicates}")
        return value

    @model_validator(mode="after")
    def _answer_within_choices(self):
        if not self.answer:
            raise ValueError("answer must not be empty")

        unknown = self.answer - set(self.choices)
        if unknown:
            raise ValueError(f"answer not among choices: {sorted(unknown)}")
        return self

    @property
    def ordered_answer(self) -> tuple[str, ...]:
        """Accepted answers in the order the choices are listed."""
        return tuple(choice for choice in self.choices if choice in self.answer)


class SingleChoiceQuestion(_ChoiceQuestion):
    """Exactly one of the choices is correct."""

    kind: Literal["SingleChoice"] = QuestionKind.SINGLE_CHOICE.value

    @model_validator(mode="after")
    def _single_answer(self):
        if len(self.answer) != 1:
            raise ValueError(
                f"single choice question needs exactly one answer, got {len(self.answer)}"
            )
        return self


class MultiChoiceQuestion(_ChoiceQuestion):
    """Every correct choice must be selected, and nothing else."""

    kind: Literal["MultiChoice"] = QuestionKind.MULTI_CHOICE.value


class FreeEntryQuestion(_QuestionBase):
    """Typed answer matched against a set of accepted strings.

    Exam files store the hints in the ``choices`` key; both ``choices`` and
    ``hints`` are accepted on input, ``hints`` is used on output.
    """

    kind: Literal["FreeEntry"] = QuestionKind.FREE_ENTRY.value
    hints: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("hints", "choices"),
        description="Hints revealed one at a time on request",
    )

    @field_validator("hints", mode="before")
    @classmethod
    def _hints_default(cls, value: Any) -> Any:
        return () if value is None else value

    @model_validator(mode="after")
    def _answer_present(self):
        if not self.answer:
            raise ValueError("answer must not be empty")
        if any(not accepted.strip() for accepted in self.answer):
            logger.debug(f"Blank accepted answer can never match: {self.prompt!r}")
        return self

    @property
    def disclosable_hints(self) -> tuple[str, ...]:
        """Hints that carry text; ``[""]`` means no hints at all."""
        return tuple(hint for hint in self.hints if hint.strip())


Question = Annotated[
    Union[SingleChoiceQuestion, MultiChoiceQuestion, FreeEntryQuestion],
    Field(discriminator="kind"),
]


# =============================================================================
# EXAM
# =============================================================================


class Exam(FrozenModel):
    """Named, ordered collection of questions."""

    name: str = Field(..., description="Display name of the exam")
    questions: tuple[Question, ...] = Field(default=(), description="Questions in study order")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("exam name must not be empty")
        return value

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the exam file record shape."""
        records = []
        for question in self.questions:
            if isinstance(question, FreeEntryQuestion):
                choices = list(question.hints)
                answer = sorted(question.answer)
            else:
                choices = list(question.choices)
                answer = list(question.ordered_answer)
            records.append(
                {
                    "kind": question.kind,
                    "prompt": question.prompt,
                    "choices": choices,
                    "answer": answer,
                    "explanation": question.explanation,
                    "refs": list(question.refs),
                }
            )
        return {"name": self.name, "questions": records}


def _raise_validation_error(exc: PydanticValidationError, name: Any) -> NoReturn:
    errors = [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]
    first = errors[0]
    location = f"{first['loc']}: " if first["loc"] else ""
    raise ValidationError(
        message=f"Invalid exam {name!r}: {location}{first['msg']}",
        details={"exam": name, "errors": errors},
    ) from exc


def _as_record(question: Any) -> Any:
    if isinstance(question, BaseModel):
        return question.model_dump()
    if isinstance(question, dict) and isinstance(question.get("kind"), QuestionKind):
        return {**question, "kind": question["kind"].value}
    return question


def build_exam(name: str, questions: Sequence[Any]) -> Exam:
    """Validate raw question records and wrap them in an Exam.

    This is the only place structural invariants are checked; a returned
    Exam is internally consistent.

    Args:
        name: Display name of the exam
        questions: Raw records (dicts) or already built question models

    Returns:
        Immutable Exam

    Raises:
        ValidationError: If any record violates a question invariant
    """
    if not isinstance(questions, (list, tuple)):
        raise ValidationError(
            message=f"Invalid exam {name!r}: questions must be a list",
            details={"exam": name, "type": type(questions).__name__},
        )

    try:
        return Exam(name=name, questions=[_as_record(q) for q in questions])
    except PydanticValidationError as exc:
        _raise_validation_error(exc, name)


def load_exam_data(data: Any) -> Exam:
    """Build an Exam from a deserialized exam file.

    Args:
        data: Mapping with ``name`` and ``questions`` keys

    Raises:
        ValidationError: If the mapping is malformed or a question is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            message="Exam data must be an object with 'name' and 'questions'",
            details={"type": type(data).__name__},
        )

    name = data.get("name")
    questions = data.get("questions")
    if questions is None:
        questions = []
    if not isinstance(questions, list):
        raise ValidationError(
            message=f"Invalid exam {name!r}: questions must be a list",
            details={"exam": name, "type": type(questions).__name__},
        )
    return build_exam(name, questions)


# =============================================================================
# RESULTS
# =============================================================================


class Verdict(FrozenModel):
    """Outcome of grading one response."""

    correct: bool = Field(..., description="Whether the response satisfies the answer")
    kind: QuestionKind = Field(..., description="Kind of the graded question")
    expected: tuple[str, ...] = Field(default=(), description="Accepted answers, for display")
    explanation: str = Field(default="", description="Question explanation")
    refs: tuple[str, ...] = Field(default=(), description="Question refs")


class HintDisclosure(FrozenModel):
    """Next hint for a free entry question, or the exhausted signal."""

    hint: str | None = Field(default=None, description="Hint text, None when none remain")
    remaining: int = Field(default=0, ge=0, description="Hints still undisclosed after this one")

    @property
    def exhausted(self) -> bool:
        return self.hint is None


class ExamSummary(FrozenModel):
    """Final tally of a study session."""

    exam_name: str
    total: int
    answered: int
    correct: int
    percentage: float
    band: str
    missed: tuple[int, ...] = ()
    hints_used: int = 0
