"""Survey constants shared across the SDK.

The question file location can be overridden via the ``SURVEY_QUESTION_FILE``
environment variable so that deployments can swap the survey without code
changes.
"""

import os
from pathlib import Path

# Bundled question set: the five image questions of the default survey.
BUNDLED_QUESTION_FILE = Path(__file__).resolve().parent / "data" / "questions.yaml"

# Overridable via SURVEY_QUESTION_FILE env var.
DEFAULT_QUESTION_FILE = Path(os.getenv("SURVEY_QUESTION_FILE") or BUNDLED_QUESTION_FILE)

# Copy shown on the results view.
RESULTS_TITLE = "Survey Completed!"
RESULTS_MESSAGE = "Thank you for your responses."

# "Question 2 of 5" label shown above the progress bar.
POSITION_LABEL = "Question {position} of {total}"
