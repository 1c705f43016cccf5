"""Command line entry point: ``examprep`` / ``python -m examprep``."""

import argparse
import dataclasses
import sys
from typing import Optional

from .config import LOG_LEVELS, get_config
from .exceptions import ExamPrepError
from .logger import get_logger, setup_logging
from .models.enums import ExplanationMode
from .models.schemas import load_exam_data
from .prompts import templates
from .session import StudyRunner
from .storage.exam_store import ExamStore

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examprep",
        description="Study exam question sets in the terminal.",
    )
    parser.add_argument("--exam", help="Exam file name inside the exam directory")
    parser.add_argument("--assets-dir", help="Directory holding exam files")
    parser.add_argument("--list", action="store_true", help="List available exams and exit")
    parser.add_argument(
        "--init-sample",
        action="store_true",
        help=f"Write {templates.SAMPLE_EXAM_FILENAME} into the exam directory and exit",
    )
    parser.add_argument("--hint-keyword", help="Word that requests a hint on free entry questions")
    parser.add_argument(
        "--show-explanation",
        choices=[mode.value for mode in ExplanationMode],
        help="When to show the explanation and references",
    )
    parser.add_argument(
        "--shuffle-choices",
        action="store_true",
        default=None,
        help="Show choices in random order",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Log level for stderr output")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        overrides = {
            "assets_dir": args.assets_dir,
            "hint_keyword": args.hint_keyword,
            "show_explanation": args.show_explanation,
            "shuffle_choices": args.shuffle_choices,
            "log_level": args.log_level,
        }
        config = dataclasses.replace(
            get_config(), **{k: v for k, v in overrides.items() if v is not None}
        )
        setup_logging(config.log_level)

        store = ExamStore(config.assets_dir)
        if store.ensure_directory():
            print(templates.DIRECTORY_CREATED.format(directory=store.directory))

        if args.init_sample:
            path = store.save_exam(
                load_exam_data(templates.SAMPLE_EXAM), templates.SAMPLE_EXAM_FILENAME
            )
            print(templates.SAMPLE_WRITTEN.format(path=path))
            return 0

        if args.list:
            exams = store.list_exams()
            if not exams:
                print(templates.NO_EXAMS_FOUND.format(directory=store.directory))
            for name in exams:
                print(name)
            return 0

        runner = StudyRunner(config)
        filename = args.exam or runner.choose_exam(store)
        exam = store.load_exam(filename)
        runner.run(exam)
        return 0

    except ExamPrepError as e:
        logger.debug(f"Aborting: {e.details}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130
