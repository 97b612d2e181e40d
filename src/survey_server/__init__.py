"""survey_server — FastAPI app serving the survey widget and its JSON API.

Run with ``survey-server`` or ``uvicorn survey_server.app:app``.
"""
