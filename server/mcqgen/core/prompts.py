# mcqgen/core/prompts.py
"""
Prompts used by the MCQ generation pipeline.

The model gets one human message: the generation template with the request
fields filled in, followed by a block describing the JSON shape to return.
"""

from langchain_core.prompts import ChatPromptTemplate

from mcqgen.models import format_count


MCQ_TEMPLATE = (
    "Generate exactly {mcqs} multiple-choice questions (MCQs) based on the following details. "
    "Each question must have 4 options, with exactly one marked as correct. "
    "Tag: {tag} Technology: {technology} Prompt: {mcqPrompt} Difficulty Level: {level} "
    "{format_instructions}"
)


def build_format_instructions(mcqs) -> str:
    """
    JSON shape instructions. Only the question count varies between requests.
    """
    return (
        "\n"
        "Respond with a valid JSON object containing the following fields:\n"
        f"- mcqs: an array of {format_count(mcqs)} objects where each object contains:\n"
        "  - question: a string representing the MCQ prompt.\n"
        "  - options: an array of objects where each object contains:\n"
        "    - text: a string representing the option text.\n"
        "    - correct: a boolean indicating whether the option is correct.\n"
    )


def build_mcq_prompt(mcqs) -> ChatPromptTemplate:
    """
    Template with the format instructions already partialed in; the remaining
    variables are mcqs, tag, technology, mcqPrompt and level.
    """
    prompt = ChatPromptTemplate.from_template(MCQ_TEMPLATE)
    return prompt.partial(format_instructions=build_format_instructions(mcqs))
