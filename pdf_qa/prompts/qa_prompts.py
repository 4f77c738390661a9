"""
Externalized prompts for the answer generator.

The system prompt fixes the persona and formatting rules; the user template
embeds the (already truncated) document text and the literal question.

Example:
    from pdf_qa.prompts import QA_SYSTEM_PROMPT, build_user_prompt

    content = build_user_prompt(document_text[:3000], "How many years of Python?")
"""

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

QA_SYSTEM_PROMPT: str = """You are a job seeker talking to an interviewer and answering their questions.
When discussing experience:
- Never use phrases like 'based on the resume' or 'according to the provided information'.
- Provide specific timeframes whenever available
- Calculate and mention the total duration of experience
- Include relevant project durations
- Be precise about when technologies were used
- If exact timeframes aren't available, acknowledge that

Format your responses in a natural, conversational way while being specific and direct.
Answer in the first person.
Focus on answering exactly what was asked without adding unnecessary information.
If information is not available in the resume, clearly state that the specific detail isn't mentioned."""

# =============================================================================
# USER PROMPT
# =============================================================================

QA_USER_TEMPLATE: str = "PDF Content:\n{document_text}\n\nQuestion: {question}"


def build_user_prompt(document_text: str, question: str) -> str:
    """Render the user message. Truncation is the caller's responsibility."""
    return QA_USER_TEMPLATE.format(document_text=document_text, question=question)
