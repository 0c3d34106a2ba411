"""
Markdown section extraction for AI-generated feedback documents.
Lets callers score only the part of a response that has a reference.
"""
import re
from typing import Any, Dict, List, Optional

_NEXT_SECTION_RE = re.compile(r"^#{2,3}\s+", re.MULTILINE)
_RATING_RE = re.compile(r"Rating:\s*\d+/10", re.IGNORECASE)

INTERVIEW_FEEDBACK_CATEGORIES = (
    "Communication Clarity",
    "Confidence and Emotional State",
    "Response Quality",
    "Pacing and Timing",
    "Engagement and Interaction",
    "Role Fit & Alignment",
    "Overall Strengths & Areas for Improvement",
)


def extract_markdown_section(text: str, section_header: str) -> Optional[str]:
    """
    Extract the body of a "##" or "###" section from markdown text.
    
    The header match is case-insensitive and the header line may carry
    trailing text, e.g. "## Feedback (Rating: 8/10)".
    
    Args:
        text: The markdown text
        section_header: Header to look for, e.g. "Correct Answer"
        
    Returns:
        Trimmed section content up to the next section, or None if absent
    """
    header_re = re.compile(
        r"^#{2,3}\s+" + re.escape(section_header) + r"[^\n]*",
        re.IGNORECASE | re.MULTILINE,
    )
    header_match = header_re.search(text)
    if not header_match:
        return None

    newline = text.find("\n", header_match.start())
    if newline == -1:
        return None

    remaining = text[newline + 1:]
    next_section = _NEXT_SECTION_RE.search(remaining)
    if next_section:
        return remaining[:next_section.start()].strip()
    return remaining.strip()


def extract_feedback_section(feedback: str) -> Optional[str]:
    """Extract the "Feedback" section with any "Rating: N/10" removed."""
    section = extract_markdown_section(feedback, "Feedback")
    if not section:
        return None
    return _RATING_RE.sub("", section).strip()


def extract_correct_answer_section(feedback: str) -> Optional[str]:
    """Extract the "Correct Answer" section of question feedback."""
    return extract_markdown_section(feedback, "Correct Answer")


def extract_interview_categories(feedback: str) -> Dict[str, str]:
    """Map each interview feedback category present in the text to its body."""
    categories: Dict[str, str] = {}
    for category in INTERVIEW_FEEDBACK_CATEGORIES:
        section = extract_markdown_section(feedback, category)
        if section:
            categories[category] = section
    return categories


def extract_resume_category_summary(analysis: Any, category: str) -> Optional[str]:
    """Return the summary of a resume analysis category, if any."""
    if not isinstance(analysis, dict):
        return None
    category_data = analysis.get(category)
    if not isinstance(category_data, dict):
        return None
    return category_data.get("summary") or None


def extract_resume_category_feedback(analysis: Any, category: str) -> List[str]:
    """Return the non-empty feedback messages of a resume analysis category."""
    if not isinstance(analysis, dict):
        return []
    category_data = analysis.get(category)
    if not isinstance(category_data, dict):
        return []
    feedback = category_data.get("feedback")
    if not isinstance(feedback, list):
        return []
    return [
        item.get("message") for item in feedback
        if isinstance(item, dict) and isinstance(item.get("message"), str) and item.get("message")
    ]
