"""QuestionStore loading and validation tests.

Covers the bundled survey file, both accepted YAML layouts, and every
ConfigurationError path (missing or unreadable file, bad YAML, empty set, question
without options, duplicate ids).
"""

import textwrap

import pytest

from survey_engine.errors import ConfigurationError
from survey_engine.questions import QuestionStore


def _write(tmp_path, text: str):
    path = tmp_path / "questions.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


# =====================================================================
# Bundled survey
# =====================================================================


def test_bundled_survey_has_five_questions(bundled_questions):
    assert bundled_questions.total == 5
    assert bundled_questions.ids == [1, 2, 3, 4, 5]
    assert bundled_questions.title == "Personal Preferences"


def test_bundled_questions_have_prompt_image_and_four_options(bundled_questions):
    for q in bundled_questions.questions:
        assert q.prompt, f"Question {q.id} missing prompt"
        assert q.image and q.image.startswith("https://"), f"Question {q.id} missing image"
        assert len(q.options) == 4, f"Question {q.id} has {len(q.options)} options"


def test_bundled_first_question(bundled_questions):
    q = bundled_questions.at(0)
    assert q.id == 1
    assert q.prompt == "Which of these landscapes do you find most relaxing?"
    assert q.options[0] == "A sunny beach"


def test_store_keeps_loaded_set(tmp_path):
    path = _write(tmp_path, """
        - id: 1
          question: Only one?
          options: [agree, disagree]
    """)
    store = QuestionStore(path)
    assert store.questions is None
    loaded = store.load()
    assert store.questions is loaded
    assert store.path == path


# =====================================================================
# Layouts
# =====================================================================


def test_bare_list_layout(tmp_path):
    path = _write(tmp_path, """
        - id: 10
          question: First?
          image: a.png
          options: [one, two]
        - id: 20
          prompt: Second?
          options: [three]
    """)
    qs = QuestionStore(path).load()
    assert qs.ids == [10, 20]
    assert qs.title is None
    assert qs.at(1).prompt == "Second?"
    assert qs.at(1).image is None


def test_mapping_layout_with_title(tmp_path):
    path = _write(tmp_path, """
        title: Colours
        questions:
          - id: 1
            question: Favourite colour?
            options: [red, green, blue]
    """)
    qs = QuestionStore(path).load()
    assert qs.title == "Colours"
    assert qs.at(0).options == ("red", "green", "blue")


def test_from_raw_accepts_parsed_data():
    qs = QuestionStore.from_raw([
        {"id": 1, "question": "A?", "options": ["x"]},
        {"id": 2, "question": "B?", "options": ["y", "z"]},
    ])
    assert len(qs) == 2


# =====================================================================
# Configuration errors
# =====================================================================


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Missing YAML file"):
        QuestionStore(tmp_path / "nope.yaml").load()


def test_malformed_yaml(tmp_path):
    path = _write(tmp_path, "- id: 1\n  options: [unclosed\n")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        QuestionStore(path).load()


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        QuestionStore(tmp_path).load()


def test_file_not_utf8(tmp_path):
    path = tmp_path / "questions.yaml"
    path.write_bytes(b"- id: 1\n  question: caf\xe9?\n  options: [yes]\n")
    with pytest.raises(ConfigurationError, match="Cannot read"):
        QuestionStore(path).load()


@pytest.mark.parametrize("text", ["", "[]\n", "questions: []\n", "title: Empty\n"])
def test_empty_question_set(tmp_path, text):
    path = _write(tmp_path, text)
    with pytest.raises(ConfigurationError, match="empty"):
        QuestionStore(path).load()


def test_question_without_options(tmp_path):
    path = _write(tmp_path, """
        - id: 1
          question: No choices?
          options: []
    """)
    with pytest.raises(ConfigurationError, match="Invalid question #1"):
        QuestionStore(path).load()


def test_question_missing_prompt():
    with pytest.raises(ConfigurationError, match="Invalid question #2"):
        QuestionStore.from_raw([
            {"id": 1, "question": "A?", "options": ["x"]},
            {"id": 2, "options": ["y"]},
        ])


def test_duplicate_ids():
    with pytest.raises(ConfigurationError, match="Duplicate question id 7"):
        QuestionStore.from_raw([
            {"id": 7, "question": "A?", "options": ["x"]},
            {"id": 7, "question": "B?", "options": ["y"]},
        ])


def test_non_list_questions():
    with pytest.raises(ConfigurationError, match="Expected a list"):
        QuestionStore.from_raw({"questions": "not a list"})


def test_non_mapping_question():
    with pytest.raises(ConfigurationError, match="not a mapping"):
        QuestionStore.from_raw(["just a string"])
