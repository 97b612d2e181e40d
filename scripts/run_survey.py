#!/usr/bin/env python3
"""Take the survey in a terminal.

Renders the same step views the web widget draws: a "Question i of N"
header, a text progress bar, numbered options, and the answer summary at
the end with an offer to take the survey again.

Usage::

    # Interactive run over the bundled questions
    python scripts/run_survey.py

    # Use a different question file
    python scripts/run_survey.py --questions path/to/questions.yaml

    # Answer every question with a random option (no prompts)
    python scripts/run_survey.py --random --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path so the script runs from a plain checkout.
# ---------------------------------------------------------------------------
_SCRIPT_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _SCRIPT_DIR.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from survey_engine.engine import SurveyEngine  # noqa: E402
from survey_engine.errors import ConfigurationError  # noqa: E402
from survey_engine.models.session import Progress, QuestionStep, ResultsStep  # noqa: E402
from survey_engine.questions import QuestionStore  # noqa: E402

logger = logging.getLogger("run_survey")

_DOUBLE_LINE = "=" * 60
_SINGLE_LINE = "-" * 60
_BAR_WIDTH = 30

# Set by main() from --quiet.
_quiet = False


def _print(*args, **kwargs) -> None:
    """Print wrapper that respects the --quiet flag."""
    if not _quiet:
        print(*args, **kwargs)


def progress_bar(progress: Progress) -> str:
    filled = round(progress.ratio * _BAR_WIDTH)
    return f"[{'#' * filled}{'.' * (_BAR_WIDTH - filled)}] {progress.percent:3.0f}%"


def show_question(step: QuestionStep) -> None:
    """Print the header, progress bar, prompt, image and numbered options."""
    q = step.question
    _print(f"\n{_DOUBLE_LINE}")
    _print(f" {step.label}")
    _print(f" {progress_bar(step.progress)}")
    _print(_DOUBLE_LINE)
    _print(f"\n {q.prompt}")
    if q.image:
        _print(f" (image: {q.image})")
    _print()
    for i, option in enumerate(q.options, 1):
        _print(f"  {i}. {option}")


def show_results(step: ResultsStep) -> None:
    """Print the completion message and every answer in question order."""
    _print(f"\n{_DOUBLE_LINE}")
    _print(f" {step.title}")
    _print(_DOUBLE_LINE)
    _print(f" {step.message}\n")
    _print(" Your Answers:")
    _print(f" {_SINGLE_LINE}")
    for a in step.answers:
        _print(f" {a.prompt}")
        _print(f"     - {a.answer}")


def read_answer(options: list[str]) -> str:
    """Read an option number, or take the typed text as the answer."""
    raw = input("\n Your choice: ").strip()
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return options[int(raw) - 1]
    return raw


def run_once(engine: SurveyEngine, rng: random.Random | None) -> None:
    """Drive one session from the first question to the results view."""
    while not engine.is_complete:
        step = engine.view()
        show_question(step)
        if rng is not None:
            option = rng.choice(step.question.options)
            _print(f"\n Your choice: {option}")
        else:
            option = read_answer(step.question.options)
        engine.submit_answer(option)
    show_results(engine.view())


def main() -> None:
    global _quiet

    parser = argparse.ArgumentParser(
        description="Take the multiple-choice survey in a terminal.",
    )
    parser.add_argument(
        "--questions",
        default=None,
        help="Path to a question YAML file (default: bundled survey or $SURVEY_QUESTION_FILE)",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Answer every question with a random option and exit after one run",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --random",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all print output (exit code still reflects success/failure)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for the survey SDK (default: WARNING)",
    )
    args = parser.parse_args()
    _quiet = args.quiet

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        questions = QuestionStore(args.questions).load()
    except ConfigurationError as exc:
        logger.error("Cannot start survey: %s", exc)
        sys.exit(1)

    engine = SurveyEngine(questions)
    rng = random.Random(args.seed) if args.random else None

    try:
        while True:
            run_once(engine, rng)
            if rng is not None:
                break
            again = input("\n Take another survey? [y/N] ").strip().lower()
            if again not in ("y", "yes"):
                break
            engine.reset()
    except (EOFError, KeyboardInterrupt):
        _print("\n Survey abandoned.")
        sys.exit(130)


if __name__ == "__main__":
    main()
