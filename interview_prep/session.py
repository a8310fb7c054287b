# UI state for one user working through a question set; the Streamlit front end
# keeps one PrepSession per browser session and renders whatever `view` says.
# interview_prep/session.py
from contextlib import contextmanager
from typing import List, Optional

from pydantic import BaseModel

from interview_prep.models.enums import ViewState
from interview_prep.models.flows import (
    AssessUserAnswerInput,
    AssessUserAnswerOutput,
    GenerateLearningPathsInput,
    GenerateLearningPlanInput,
    LearningPath,
    Mcq,
)
from interview_prep.models.question import ExcelData, Question
from interview_prep.utils.config import settings
from interview_prep.utils.exceptions import InvalidTransitionError
from interview_prep.utils.logger import logger

EMPTY_ANSWER_TITLE = "Empty Answer"
EMPTY_ANSWER_MESSAGE = "Please provide an answer before submitting."
NO_QUESTIONS_TITLE = "No Questions"
NO_QUESTIONS_MESSAGE = "This role has no questions. Please choose another role."


class Notification(BaseModel):
    title: str
    message: str
    variant: str = "destructive"


class PrepSession:
    def __init__(self, weak_score_threshold: Optional[int] = None):
        self.weak_score_threshold = (
            weak_score_threshold if weak_score_threshold is not None else settings.weak_score_threshold
        )
        self.notification: Optional[Notification] = None
        self.is_loading = False
        self._reset()

    def _reset(self):
        self.view = ViewState.UPLOAD
        self.excel_data: Optional[ExcelData] = None
        self.selected_role = ""
        self.current_question_index = 0
        self.user_answer = ""
        self.assessment: Optional[AssessUserAnswerOutput] = None
        self.learning_plan: Optional[str] = None
        # Extras shown alongside the main flow; none of them change the view.
        self.mcq: Optional[Mcq] = None
        self.audio_media: Optional[str] = None
        self.skills: List[str] = []
        self.study_guide: Optional[str] = None
        self.learning_path: Optional[LearningPath] = None
        self.prepared_role: Optional[str] = None  # role the skills/guide/path above belong to

    def _require(self, *views: ViewState):
        if self.view not in views:
            allowed = ", ".join(v.value for v in views)
            raise InvalidTransitionError(
                f"Action not available from view '{self.view.value}'.",
                {"view": self.view.value, "allowed": allowed},
            )

    def _go(self, view: ViewState):
        logger.debug(f"View transition: {self.view.value} -> {view.value}")
        self.view = view

    # --- Derived state ---

    @property
    def questions(self) -> List[Question]:
        if self.excel_data and self.selected_role:
            return self.excel_data.questions_for(self.selected_role)
        return []

    @property
    def current_question(self) -> Optional[Question]:
        questions = self.questions
        if 0 <= self.current_question_index < len(questions):
            return questions[self.current_question_index]
        return None

    @property
    def progress(self) -> float:
        if not self.questions:
            return 0.0
        return (self.current_question_index + 1) / len(self.questions) * 100

    @property
    def is_weak(self) -> bool:
        return self.assessment is not None and self.assessment.score < self.weak_score_threshold

    @property
    def is_last_question(self) -> bool:
        return self.current_question_index >= len(self.questions) - 1

    # --- Notifications and loading ---

    def fail(self, title: str, message: str):
        """Records a user-facing error; the current view is left as it is."""
        logger.info(f"Notification '{title}': {message}")
        self.notification = Notification(title=title, message=message)

    def pop_notification(self) -> Optional[Notification]:
        notification, self.notification = self.notification, None
        return notification

    @contextmanager
    def loading(self):
        """Marks the session busy for the duration of one outstanding request."""
        self.is_loading = True
        try:
            yield self
        finally:
            self.is_loading = False

    # --- Transitions ---

    def load_data(self, data: ExcelData):
        self._require(ViewState.UPLOAD)
        self.excel_data = data
        self._go(ViewState.ROLE_SELECT)

    def select_role(self, role: str) -> bool:
        self._require(ViewState.ROLE_SELECT)
        if role not in self.excel_data.roles:
            raise InvalidTransitionError(f"Unknown role '{role}'.", {"roles": list(self.excel_data.roles)})
        if not self.excel_data.roles[role]:
            self.fail(NO_QUESTIONS_TITLE, NO_QUESTIONS_MESSAGE)
            return False
        self.selected_role = role
        self.current_question_index = 0
        self._go(ViewState.ASSESSMENT)
        return True

    def validate_answer(self) -> bool:
        if self.current_question is None or not self.user_answer.strip():
            self.fail(EMPTY_ANSWER_TITLE, EMPTY_ANSWER_MESSAGE)
            return False
        return True

    def assessment_request(self) -> AssessUserAnswerInput:
        self._require(ViewState.ASSESSMENT)
        question = self.current_question
        return AssessUserAnswerInput(
            question=question.question,
            user_answer=self.user_answer,
            expected_answer=question.expected_answer,
            role=self.selected_role,
        )

    def record_assessment(self, assessment: AssessUserAnswerOutput):
        self._require(ViewState.ASSESSMENT)
        self.assessment = assessment
        self._go(ViewState.FEEDBACK)

    def learning_plan_request(self) -> GenerateLearningPlanInput:
        self._require(ViewState.FEEDBACK)
        if self.assessment is None:
            raise InvalidTransitionError("No assessment to build a learning plan from.")
        return GenerateLearningPlanInput(
            role_name=self.selected_role,
            questions=[q.question for q in self.questions],
            weak_areas=self.assessment.gaps,
        )

    def record_learning_plan(self, learning_plan: str):
        self._require(ViewState.FEEDBACK)
        self.learning_plan = learning_plan
        self._go(ViewState.LEARNING)

    def next_question(self):
        self._require(ViewState.FEEDBACK, ViewState.LEARNING)
        if self.current_question_index < len(self.questions) - 1:
            self.current_question_index += 1
            self._go(ViewState.ASSESSMENT)
        else:
            self._go(ViewState.COMPLETED)
        self.assessment = None
        self.learning_plan = None
        self.user_answer = ""
        self.mcq = None
        self.audio_media = None

    def try_again(self):
        self._require(ViewState.FEEDBACK, ViewState.LEARNING)
        self.assessment = None
        self.learning_plan = None
        self._go(ViewState.ASSESSMENT)

    def start_over(self):
        logger.debug("Starting over.")
        self._reset()

    # --- Role preparation extras ---

    def prepare_for(self, role: str):
        """Drops skills, study guide and learning path built for a different role."""
        if role != self.prepared_role:
            self.skills = []
            self.study_guide = None
            self.learning_path = None
            self.prepared_role = role

    def learning_path_request(self, role: str) -> GenerateLearningPathsInput:
        questions = self.excel_data.questions_for(role) if self.excel_data else []
        return GenerateLearningPathsInput(
            role_name=role,
            company_name=self.excel_data.company if self.excel_data else "",
            questions=[q.question for q in questions],
        )
