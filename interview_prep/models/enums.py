# interview_prep/models/enums.py
from enum import Enum


class Difficulty(str, Enum):
    """Difficulty label a question may carry in the uploaded sheet."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value) -> "Difficulty | None":
        """Case-insensitive lookup; returns None for anything unrecognised."""
        if not isinstance(value, str):
            return None
        cleaned = value.strip().lower()
        for member in cls:
            if member.value.lower() == cleaned:
                return member
        return None


class ViewState(str, Enum):
    """Screens of the preparation flow, in the order a user normally visits them."""
    UPLOAD = "upload"
    ROLE_SELECT = "role_select"
    ASSESSMENT = "assessment"
    FEEDBACK = "feedback"
    LEARNING = "learning"
    COMPLETED = "completed"
