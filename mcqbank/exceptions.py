# mcqbank/exceptions.py
"""Errors raised by the question repository and its loaders."""


class MCQBankError(Exception):
    """Base class for request-level failures the API reports as 400."""


class InvalidLessonError(MCQBankError):
    def __init__(self, key: str):
        self.key = key
        super().__init__("Invalid lesson key")


class NoQuestionsForSubjectError(MCQBankError):
    """Raised for an unknown subject and for a subject with zero questions alike."""

    def __init__(self, subject: str | None):
        self.subject = subject
        super().__init__(f"No questions found for subject {subject}")


class SourceLoadError(Exception):
    """The question source root could not be read; startup must not continue."""
