# Data models for uploaded interview questions
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional

from interview_prep.models.enums import Difficulty


class Question(BaseModel):
    question: str = Field(min_length=1)
    expected_answer: Optional[str] = None
    difficulty: Optional[Difficulty] = None

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question text must not be empty")
        return v


class ExcelData(BaseModel):
    company: str
    # Role name -> questions, in sheet order. A role may have no questions.
    roles: Dict[str, List[Question]]

    def questions_for(self, role: str) -> List[Question]:
        return self.roles.get(role, [])
