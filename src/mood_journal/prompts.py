"""Fixed prompt templates and fallback texts."""

from mood_journal.entities import Mood, PromptKind

INSTRUCTION_TEMPLATES: dict[PromptKind, str] = {
    PromptKind.DAILY: (
        "Generate a thoughtful, reflective journal prompt that encourages "
        "self-reflection and mindfulness. Keep it concise and inspiring."
    ),
    PromptKind.RANT_RESPONSE: (
        "The user has shared a rant or frustration. Provide a compassionate, "
        "understanding response that acknowledges their feelings and offers gentle "
        "perspective or encouragement. Be supportive without being dismissive."
    ),
}

# Returned with HTTP 200 when the upstream answer lacks a candidate text
APOLOGY_RESPONSE = "I couldn't generate a response at the moment. Please try again later."

# Substituted per position when a daily prompt slot cannot be filled
DEFAULT_DAILY_PROMPTS: tuple[str, ...] = (
    "Take a moment to reflect on something that brought you joy recently.",
    "What is one thing you are grateful for today, and why does it matter to you?",
    "Describe a challenge you faced recently and what it taught you about yourself.",
)

RANT_ERROR_RESPONSE = (
    "I'm having trouble responding right now, but I'm here to listen. "
    "Feel free to continue sharing your thoughts."
)

RANT_EMPTY_RESPONSE = (
    "I understand you might be going through a difficult time. Remember that "
    "expressing your feelings is healthy, and tomorrow is a new day with new possibilities."
)

DEFAULT_ARTWORK_STYLE = "Create a calming digital artwork"

ARTWORK_STYLES: dict[Mood, str] = {
    Mood.HAPPY: "Create a bright, joyful digital artwork with warm colors",
    Mood.CALM: "Create a serene, peaceful digital artwork with soft blues and greens",
    Mood.NEUTRAL: "Create a balanced, harmonious digital artwork with neutral tones",
    Mood.SAD: "Create a gentle, comforting digital artwork with soft purples and blues",
    Mood.ANGRY: "Create a transformative digital artwork that channels intense emotions into beauty",
    Mood.ANXIOUS: "Create a grounding, reassuring digital artwork with stabilizing patterns",
}

DEFAULT_WRITING_PROMPT = "What would you like to write about today?"

MOOD_WRITING_PROMPTS: dict[Mood, str] = {
    Mood.HAPPY: "What brought you joy today? What are you grateful for?",
    Mood.CALM: "What is bringing you peace today? What makes you feel grounded?",
    Mood.NEUTRAL: "How is your day going? What's on your mind?",
    Mood.SAD: "What's weighing on you today? How can you be gentle with yourself?",
    Mood.ANGRY: "What triggered this feeling? What needs aren't being met?",
    Mood.ANXIOUS: "What worries are on your mind? What's one small step you can take?",
}
