"""
Prompts module initialization.

Exports the prompt constants used by the answer generator.
"""

from pdf_qa.prompts.qa_prompts import (
    QA_SYSTEM_PROMPT,
    QA_USER_TEMPLATE,
    build_user_prompt,
)

__all__ = [
    "QA_SYSTEM_PROMPT",
    "QA_USER_TEMPLATE",
    "build_user_prompt",
]
