"""Prompt construction for deck-based flashcard generation."""

import re

LANGUAGE_NAMES = (
    "spanish",
    "french",
    "german",
    "italian",
    "portuguese",
    "russian",
    "chinese",
    "japanese",
    "korean",
    "arabic",
    "hindi",
    "indonesian",
    "dutch",
    "swedish",
    "norwegian",
    "danish",
    "polish",
    "turkish",
    "hebrew",
    "thai",
    "vietnamese",
    "hungarian",
    "finnish",
    "czech",
)

_LANGUAGE_LEARNING_PATTERNS = (
    re.compile(r"\benglish\s+to\s+\w+"),
    re.compile(r"\w+\s+to\s+english"),
    re.compile(r"\b\w+\s+vocabulary\b"),
    re.compile(r"\b\w+\s+translation"),
    re.compile(r"learn\s+to\s+speak\s+\w+"),
    re.compile(r"\b\w+\s+phrases\b"),
    re.compile(r"\b\w+\s+words\b"),
)

_LEARNING_KEYWORDS = ("vocabulary", "translation", "phrases", "words")
_LEARN_LANGUAGE = re.compile(r"learn\s+\w+\s+language")

# Order matters: the first pattern that matches names the language.
_LANGUAGE_CAPTURE_PATTERNS = (
    re.compile(r"(?:learning|learn)\s+(\w+)"),
    re.compile(r"english\s+to\s+(\w+)"),
    re.compile(r"(\w+)\s+to\s+english"),
    re.compile(r"(\w+)\s+vocabulary"),
    re.compile(r"(\w+)\s+language"),
    re.compile(r"(\w+)\s+translation"),
)

DEFAULT_TARGET_LANGUAGE = "Target Language"


def _topic_text(title: str, description: str | None) -> str:
    return f"{title} {description or ''}".lower()


def is_language_learning(title: str, description: str | None = None) -> bool:
    """Whether a deck's title and description describe vocabulary or translation practice."""
    content = _topic_text(title, description)

    if any(pattern.search(content) for pattern in _LANGUAGE_LEARNING_PATTERNS):
        return True

    has_language_name = any(name in content for name in LANGUAGE_NAMES)
    has_learning_context = any(
        keyword in content for keyword in _LEARNING_KEYWORDS
    ) or bool(_LEARN_LANGUAGE.search(content))
    return has_language_name and has_learning_context


def detect_languages(title: str, description: str | None = None) -> tuple[str, str]:
    """
    Guess the (source, target) languages of a language-learning deck.

    English is assumed to be the source unless the text reads "<lang> to english".
    """
    content = _topic_text(title, description)

    for pattern in _LANGUAGE_CAPTURE_PATTERNS:
        match = pattern.search(content)
        if match:
            detected = match.group(1).capitalize()
            if "to english" in content and "english to" not in content:
                return detected, "English"
            return "English", detected

    return "English", DEFAULT_TARGET_LANGUAGE


def build_generation_prompt(
    title: str, description: str | None, count: int, difficulty: str
) -> str:
    topic = f"{title}: {description}" if description else title

    if is_language_learning(title, description):
        source, target = detect_languages(title, description)
        return f"""Generate {count} flashcards for language learning: {topic}

For language learning content, create simple translation pairs:
- Front: Word or phrase in {source}
- Back: Direct translation in {target}
- Difficulty: {difficulty}
- Focus on practical, commonly used vocabulary
- No explanations or additional context needed

Requirements:
- Create exactly {count} flashcards
- Use direct translations only
- Cover useful everyday vocabulary
- Progress from basic to more complex based on difficulty level

Topic: {topic}"""

    return f"""Generate {count} educational flashcards about: {topic}

Create effective study cards based on the content:
- Front: Clear questions, terms, or prompts
- Back: Accurate answers or explanations
- Difficulty level: {difficulty}
- Cover key concepts and information

Requirements:
- Create exactly {count} flashcards
- Make cards appropriate for active recall
- Focus on important concepts and facts
- Ensure accuracy and educational value
- Progress from basic to more advanced based on difficulty

Topic: {topic}"""
