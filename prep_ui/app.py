# prep_ui/app.py
import base64
import sys
import os

import streamlit as st

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from interview_prep.models.enums import ViewState
from interview_prep.models.flows import GenerateMcqInput
from interview_prep.session import PrepSession
from prep_ui.api_client import PrepApiClient

# --- Page Config ---
st.set_page_config(page_title="Interview Prep Coach", page_icon="🧠", layout="centered")


@st.cache_resource
def get_api_client() -> PrepApiClient:
    return PrepApiClient()


api = get_api_client()

if "prep" not in st.session_state:
    st.session_state.prep = PrepSession()
prep: PrepSession = st.session_state.prep


def call(action, *args):
    """Runs one API call with the session marked busy and a spinner on screen."""
    with prep.loading(), st.spinner("Processing..."):
        return action(*args)


def start_over():
    prep.start_over()
    st.rerun()


def audio_bytes(media: str) -> bytes:
    return base64.b64decode(media.split(",", 1)[1])


# --- Header and notifications ---
st.title("🧠 Interview Prep Coach")

notification = prep.pop_notification()
if notification:
    st.error(f"**{notification.title}**  \n{notification.message}", icon="🚫")


# --- Views ---

def render_upload():
    st.header("Get Started")
    st.write("Upload your interview prep Excel file to begin.")
    with st.form("upload_form", clear_on_submit=False):
        uploaded = st.file_uploader("Upload Excel File", type=["xlsx", "csv"])
        st.caption("File name will be used as the company name (e.g., Amazon.xlsx).")
        submitted = st.form_submit_button("✨ Upload and Analyze", use_container_width=True)

    if submitted:
        filename = uploaded.name if uploaded else ""
        content = uploaded.getvalue() if uploaded else b""
        data, error = call(api.upload, filename, content)
        if error:
            prep.fail("Upload Failed", error)
        else:
            prep.load_data(data)
        st.rerun()


def render_prepare_panel(role: str):
    prep.prepare_for(role)
    with st.expander(f"Prepare for the {role} role"):
        col1, col2 = st.columns(2)
        if col1.button("Suggest key skills", key="skills_btn"):
            skills, error = call(api.skills, role, prep.excel_data.company)
            if error:
                prep.fail("Study Guide Failed", error)
            else:
                prep.skills = skills
                prep.study_guide = None
            st.rerun()
        if col2.button("Build learning path", key="path_btn"):
            path, error = call(api.learning_path, prep.learning_path_request(role))
            if error:
                prep.fail("Learning Path Failed", error)
            else:
                prep.learning_path = path
            st.rerun()

        if prep.skills:
            st.markdown("**Key skills**")
            st.markdown("\n".join(f"- {skill}" for skill in prep.skills))
            if st.button("Generate study guide", key="guide_btn"):
                guide, error = call(api.study_guide, prep.skills)
                if error:
                    prep.fail("Study Guide Failed", error)
                else:
                    prep.study_guide = guide
                st.rerun()
        if prep.study_guide:
            st.markdown(prep.study_guide)
        if prep.learning_path:
            st.markdown(prep.learning_path.markdown)


def render_role_select():
    st.header(f"💼 {prep.excel_data.company}")
    st.write("Select a role to start your assessment.")
    roles = list(prep.excel_data.roles)
    role = st.selectbox("Role", roles, index=None, placeholder="Select a role...")

    if role:
        render_prepare_panel(role)

    col1, col2 = st.columns(2)
    if col1.button("Start Over"):
        start_over()
    if col2.button("Start Assessment ➡️", disabled=not role, type="primary"):
        prep.select_role(role)
        st.rerun()


def render_practice_tools():
    question = prep.current_question
    col1, col2 = st.columns(2)
    if col1.button("🔊 Listen", key=f"listen_{prep.current_question_index}"):
        media, error = call(api.audio, question.question)
        if error:
            prep.fail("Audio Failed", error)
        else:
            prep.audio_media = media
        st.rerun()
    if col2.button("Practice as multiple choice", key=f"mcq_{prep.current_question_index}"):
        mcq, error = call(api.mcq, GenerateMcqInput(question=question.question, role=prep.selected_role))
        if error:
            prep.fail("Practice Question Failed", error)
        else:
            prep.mcq = mcq
        st.rerun()

    if prep.audio_media:
        st.audio(audio_bytes(prep.audio_media), format="audio/wav")

    if prep.mcq:
        with st.container(border=True):
            choice = st.radio(prep.mcq.mcq_question, prep.mcq.options, index=None,
                              key=f"mcq_choice_{prep.current_question_index}")
            if choice is not None:
                if prep.mcq.is_correct(choice):
                    st.success("Correct!")
                else:
                    st.warning(f"Not quite. The correct answer is: {prep.mcq.correct_answer}")


def render_assessment():
    question = prep.current_question
    st.caption(f"{prep.selected_role} Assessment")
    st.progress(prep.progress / 100)
    st.subheader(question.question)
    if question.difficulty:
        st.markdown(f":blue-background[{question.difficulty.value}]")

    render_practice_tools()

    prep.user_answer = st.text_area(
        "Your Answer:",
        value=prep.user_answer,
        placeholder="Type your answer here...",
        height=240,
        key=f"answer_{prep.current_question_index}",
    )

    col1, col2 = st.columns(2)
    if col1.button("Start Over"):
        start_over()
    if col2.button("Submit Answer ➡️", type="primary"):
        if prep.validate_answer():
            assessment, error = call(api.assess, prep.assessment_request())
            if error:
                prep.fail("Assessment Failed", error)
            else:
                prep.record_assessment(assessment)
        st.rerun()


def render_feedback():
    assessment = prep.assessment
    st.header("Assessment Feedback")
    st.caption(prep.current_question.question)

    colour = "red" if prep.is_weak else "green"
    st.markdown(f"<p style='text-align:center'>Your Score</p>"
                f"<h1 style='text-align:center;color:{colour}'>{assessment.score}<small>/100</small></h1>",
                unsafe_allow_html=True)
    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("#### ✅ Strengths")
        st.write(assessment.strengths)
    with col2:
        st.markdown("#### ❌ Gaps")
        st.write(assessment.gaps)

    col1, col2, col3 = st.columns(3)
    if col1.button("⬅️ Try Again"):
        prep.try_again()
        st.rerun()
    if prep.is_weak and col2.button("💡 Get Learning Plan"):
        plan, error = call(api.learning_plan, prep.learning_plan_request())
        if error:
            prep.fail("Failed to Create Plan", error)
        else:
            prep.record_learning_plan(plan)
        st.rerun()
    if col3.button("Next Question ➡️", type="primary"):
        prep.next_question()
        st.rerun()


def render_learning():
    st.header("Personalized Learning Plan")
    st.write(f"Based on your assessment, here are some topics to focus on for the **{prep.selected_role}** role.")
    with st.container(border=True):
        st.markdown(prep.learning_plan)
    if st.button("Back to Assessment ➡️"):
        prep.try_again()
        st.rerun()


def render_completed():
    st.success("Assessment Complete!", icon="✅")
    st.write(f"You've completed all questions for the {prep.selected_role} role.")
    st.write("Great job! You can now start over with a new file or a different role.")
    if st.button("Start New Assessment", type="primary", use_container_width=True):
        start_over()


VIEWS = {
    ViewState.UPLOAD: render_upload,
    ViewState.ROLE_SELECT: render_role_select,
    ViewState.ASSESSMENT: render_assessment,
    ViewState.FEEDBACK: render_feedback,
    ViewState.LEARNING: render_learning,
    ViewState.COMPLETED: render_completed,
}

VIEWS[prep.view]()
