# Input/output schemas for the model-backed flows.
# Field descriptions are passed to the model as part of the output format instructions.
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# --- Answer assessment ---

class AssessUserAnswerInput(BaseModel):
    question: str = Field(min_length=1, description="The interview question.")
    user_answer: str = Field(min_length=1, description="The user's answer to the question.")
    expected_answer: Optional[str] = Field(None, description="The expected answer to the question, if available.")
    role: str = Field(min_length=1, description="The role the user is interviewing for.")


class AssessUserAnswerOutput(BaseModel):
    score: int = Field(description="A score (0-100) representing the quality of the user's answer.")
    strengths: str = Field(description="A summary of the strengths of the user's answer.")
    gaps: str = Field(description="A summary of the gaps or areas for improvement in the user's answer.")

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, v):
        try:
            value = round(float(v))
        except (TypeError, ValueError):
            raise ValueError(f"score must be a number, got {v!r}")
        return max(0, min(100, value))


# --- Learning plan for weak areas ---

class GenerateLearningPlanInput(BaseModel):
    role_name: str = Field(min_length=1, description="The name of the role the user is preparing for.")
    questions: List[str] = Field(description="The interview questions asked during the assessment.")
    weak_areas: str = Field(description="The weak areas identified in the user assessment.")


class GenerateLearningPlanOutput(BaseModel):
    learning_plan: str = Field(min_length=1, description="A topic-wise learning plan to address the identified weak areas.")


# --- Structured learning path ---

class Resource(BaseModel):
    title: str = Field(description="Title of the learning resource.")
    url: str = Field(description="Publicly accessible link to the resource.")


class Skill(BaseModel):
    name: str = Field(description="Name of the skill.")
    description: str = Field(description="A brief one-sentence description of the skill.")
    resources: List[Resource] = Field(
        min_length=2,
        description="2-3 high-quality, publicly accessible online resources for learning the skill.",
    )

    @field_validator("resources", mode="before")
    @classmethod
    def keep_three(cls, v):
        if isinstance(v, list):
            return v[:3]
        return v

    def to_markdown(self) -> str:
        lines = [f"### {self.name}", self.description]
        lines.extend(f"*   [{r.title}]({r.url})" for r in self.resources)
        return "\n".join(lines)


class LearningPath(BaseModel):
    skills: List[Skill] = Field(
        min_length=1,
        description="The 5-7 most critical skills for the role, most important first.",
    )

    def to_markdown(self) -> str:
        return "\n\n".join(skill.to_markdown() for skill in self.skills)


class GenerateLearningPathsInput(BaseModel):
    role_name: str = Field(min_length=1, description="The name of the role the user is preparing for.")
    company_name: str = Field(min_length=1, description="The name of the company.")
    questions: List[str] = Field(description="A list of sample interview questions for the role.")


class LearningPathResponse(LearningPath):
    markdown: str


# --- Multiple-choice variant ---

class GenerateMcqInput(BaseModel):
    question: str = Field(min_length=1, description="The interview question to base the MCQ on.")
    role: str = Field(min_length=1, description="The role the user is interviewing for.")


class Mcq(BaseModel):
    mcq_question: str = Field(min_length=1, description="The generated multiple-choice question.")
    options: List[str] = Field(min_length=2, description="An array of 4-5 potential answers.")
    correct_answer: str = Field(description="The correct answer, copied exactly from the options array.")

    @model_validator(mode="after")
    def correct_answer_is_an_option(self):
        options = [opt.strip() for opt in self.options]
        if any(not opt for opt in options):
            raise ValueError("options must not be blank")
        if len(set(options)) != len(options):
            raise ValueError("options must be distinct")
        answer = self.correct_answer.strip()
        if answer not in options:
            raise ValueError(f"correct_answer {self.correct_answer!r} is not one of the options")
        self.options = options
        self.correct_answer = answer
        return self

    def is_correct(self, choice: str) -> bool:
        return str(choice).strip() == self.correct_answer


# --- Skills and study guide ---

class GenerateSkillsInput(BaseModel):
    role_name: str = Field(min_length=1, description="The name of the role the user is preparing for.")
    company_name: str = Field(min_length=1, description="The name of the company.")


class GenerateSkillsOutput(BaseModel):
    skills: List[str] = Field(min_length=1, description="A list of key skills required for the role.")

    @field_validator("skills")
    @classmethod
    def drop_blank(cls, v: List[str]) -> List[str]:
        cleaned = [s.strip() for s in v if s and s.strip()]
        if not cleaned:
            raise ValueError("skills must contain at least one non-blank entry")
        return cleaned


class GenerateStudyGuideInput(BaseModel):
    skills: List[str] = Field(min_length=1, description="The list of skills to generate a study guide for.")


class GenerateStudyGuideOutput(BaseModel):
    study_guide: str = Field(min_length=1, description="A markdown-formatted study guide with topics and links to learning resources.")


# --- Narration ---

class GenerateAudioInput(BaseModel):
    text: str = Field(min_length=1, description="The text to narrate.")


class GenerateAudioOutput(BaseModel):
    media: str  # data:audio/wav;base64,...
