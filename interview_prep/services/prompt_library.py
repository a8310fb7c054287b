# interview_prep/services/prompt_library.py
from langchain_core.prompts import PromptTemplate

# Every template ends with {format_instructions}, filled in from the flow's output schema.
PROMPT_LIBRARY = {
    "assess_user_answer": PromptTemplate.from_template(
        """
You are an AI interview coach. Your task is to assess a candidate's answer to an interview question.

Here is the role the candidate is interviewing for: {role}

Here is the interview question:
{question}

Here is the candidate's answer:
{user_answer}
{expected_answer_section}
Provide a score (0-100), strengths, and gaps based on the candidate's answer. Be specific and constructive.

{format_instructions}
"""
    ),
    "generate_learning_plan": PromptTemplate.from_template(
        """
You are an expert career coach. Your goal is to generate a personalized learning plan for the user based on their weak areas during a mock interview.

Role: {role_name}

Interview Questions:
{questions}

Weak Areas:
{weak_areas}

Based on the above information, generate a topic-wise learning plan to address the weak areas. The learning plan should be structured and easy to follow.

{format_instructions}
"""
    ),
    "generate_learning_paths": PromptTemplate.from_template(
        """
You are an expert career coach and learning specialist. Your task is to create a structured learning path for a user preparing for an interview.

First, analyze the provided role, company, and sample questions to identify the top 5-7 most critical skills (technical and soft).

Then, for each identified skill, provide a brief one-sentence description and a list of 2-3 high-quality, publicly accessible online resources (articles, tutorials, official documentation) for learning that skill.

**Input:**
Role: {role_name}
Company: {company_name}
Sample Questions:
{questions}

{format_instructions}
"""
    ),
    "generate_mcq": PromptTemplate.from_template(
        """
You are an expert question designer for technical interviews.
Your task is to create a single, clear multiple-choice question (MCQ) based on the provided interview question and role.

Generate a relevant MCQ with 4-5 plausible options, one of which is definitively correct.
The original question might be open-ended; your job is to distill a specific concept from it and frame it as an MCQ.
The correct answer must be copied exactly from the options.

**Role:** {role}
**Original Question:** {question}

{format_instructions}
"""
    ),
    "generate_skills_for_role": PromptTemplate.from_template(
        """
You are an expert career coach and hiring manager.
Based on the provided role and company, identify and list the top 10 most important technical and soft skills required.

Role: {role_name}
Company: {company_name}

Return only the list of skills.

{format_instructions}
"""
    ),
    "generate_study_guide": PromptTemplate.from_template(
        """
You are an expert learning and development coach. Your goal is to generate a helpful study guide for a user trying to learn a set of skills for a job interview.

Skills to learn:
{skills}

For each skill, provide a brief description and a list of 2-3 high-quality, publicly accessible online resources (articles, tutorials, documentation) to learn about it. Format the study guide in markdown.

Example for a single skill:

### Skill Name
A brief one-sentence description of the skill.
*   [Resource Title 1](https://example.com/link1)
*   [Resource Title 2](https://example.com/link2)

Generate the study guide based on the provided skills.

{format_instructions}
"""
    ),
}


def bullet_list(items) -> str:
    """Renders a list as '- item' lines, the way every template expects lists."""
    return "\n".join(f"- {item}" for item in items) if items else "- (none provided)"


def expected_answer_section(expected_answer: str | None) -> str:
    if not expected_answer or not expected_answer.strip():
        return ""
    return f"\nHere is the expected answer:\n{expected_answer}\n"
