"""Terminal runner tests — drive scripts/run_survey.py without a TTY."""

import importlib.util
import random
from pathlib import Path

import pytest

from survey_engine.engine import SurveyEngine

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_survey.py"


@pytest.fixture(scope="module")
def run_survey():
    spec = importlib.util.spec_from_file_location("run_survey", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_random_run_completes_and_prints_summary(run_survey, bundled_questions, capsys):
    engine = SurveyEngine(bundled_questions)
    run_survey.run_once(engine, random.Random(3))

    assert engine.is_complete
    assert len(engine.answers) == 5
    for question in bundled_questions.questions:
        assert engine.answers[question.id] in question.options

    out = capsys.readouterr().out
    assert "Question 1 of 5" in out
    assert "Question 5 of 5" in out
    assert "Survey Completed!" in out
    assert "Your Answers:" in out


def test_read_answer_maps_numbers_to_options(run_survey, monkeypatch):
    options = ["Tea", "Coffee"]
    monkeypatch.setattr("builtins.input", lambda _prompt: "2")
    assert run_survey.read_answer(options) == "Coffee"


def test_read_answer_keeps_free_text(run_survey, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _prompt: " Hot chocolate ")
    assert run_survey.read_answer(["Tea", "Coffee"]) == "Hot chocolate"


def test_progress_bar(run_survey, two_questions):
    engine = SurveyEngine(two_questions)
    engine.submit_answer("x")
    bar = run_survey.progress_bar(engine.progress())
    assert bar.count("#") == 15
    assert bar.endswith(" 50%")


def test_unreadable_question_file_exits_cleanly(run_survey, tmp_path, monkeypatch):
    monkeypatch.setattr("sys.argv", ["run_survey.py", "--questions", str(tmp_path), "--random"])
    with pytest.raises(SystemExit) as exc_info:
        run_survey.main()
    assert exc_info.value.code == 1
