"""
Description:
Fixed text used by the heuristic feedback engine.

Score brackets are inclusive lower bounds checked from highest to lowest;
anything below the last bound uses the final message.

Author: @kcaparas1630
"""

SCORE_BRACKETS = (80, 60, 40)

CONTENT_MESSAGES = (
    "Excellent answer that covers the key concepts thoroughly.",
    "Good answer that covers most of the key concepts.",
    "Adequate answer, but you missed several key concepts.",
    "Your answer is missing many of the key concepts expected for this question.",
)

PRESENTATION_MESSAGES = (
    "Your presentation is clear, concise, and well organized.",
    "Your presentation is generally clear but could be better organized.",
    "Your presentation needs improvement in terms of structure and clarity.",
    "Focus on organizing your answer into clear, complete sentences and paragraphs.",
)

TOO_BRIEF_FEEDBACK = "Your answer is too brief to evaluate. Please provide a more detailed response."
TOO_BRIEF_IMPROVEMENT = "Provide a more detailed answer"

MIN_RESPONSE_LENGTH = 10
MAX_CITED_KEYWORDS = 3

KEYWORDS_STRENGTH = "You mentioned key concepts such as {keywords}"
STRUCTURE_STRENGTH = "Your answer was well structured with multiple complete points"
MISSING_KEYWORDS_IMPROVEMENT = "Consider discussing {keywords}"
EXPAND_IMPROVEMENT = "Expand your answer with more detail and supporting examples"
CONCISE_IMPROVEMENT = "Work on conciseness by using shorter, more focused sentences"
