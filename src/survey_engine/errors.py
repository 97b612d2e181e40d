"""Exceptions raised by the survey SDK.

  - ConfigurationError: the question set cannot be used (empty, duplicate ids,
    a question without options, unreadable YAML).  Raised at startup.
  - InvalidStateError: the caller asked for something the current session
    state does not allow, e.g. answering after the survey is complete.

Both derive from ``SurveyError`` so callers can catch the SDK's errors in one
place.  The web layer maps them to HTTP status codes (see
``survey_server.errors``).
"""


class SurveyError(Exception):
    """Base class for all survey SDK errors."""


class ConfigurationError(SurveyError):
    """The question set is unusable; the survey cannot start."""


class InvalidStateError(SurveyError):
    """An operation was invoked in a session state that does not permit it."""
