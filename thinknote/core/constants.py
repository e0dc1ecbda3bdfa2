"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Summarization
# ---------------------------------------------------------------------------
SUMMARY_ASSISTANT_NAME = "Sage"
SUMMARY_MODEL_DEFAULT = "gpt-4o-mini"
SUMMARY_TEMPERATURE = 0.3
MIN_TRANSCRIPT_CHARS = 10

# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------
TRANSCRIPTION_MODEL_DEFAULT = "whisper-large-v3-turbo"
AUDIO_CONTENT_TYPE_PREFIXES = ("audio/", "video/webm")

# ---------------------------------------------------------------------------
# Sage tutor and flashcards
# ---------------------------------------------------------------------------
CHAT_MODEL_DEFAULT = "gpt-4o-mini"
SOCRATIC_TEMPERATURE = 0.8
STUDY_TEMPERATURE = 0.5
STUDY_CONTEXT_CHARS = 12000
SYSTEM_SOCRATIC = (
    f"You are {SUMMARY_ASSISTANT_NAME}, a Socratic tutor. Do not hand out direct answers first. "
    "Use questions to guide the student to articulate reasoning, expose assumptions, "
    "connect concepts, and self-correct. Keep a warm, curious tone. Keep turns concise."
)
SYSTEM_STUDY = (
    f"You are {SUMMARY_ASSISTANT_NAME}, a study coach. Use the provided document(s) as the primary context. "
    "Explain concepts clearly, connect ideas, and keep the student active with brief checks for understanding. "
    "When unsure, ask for clarification or more context. Avoid hallucinations."
)

FLASHCARD_TEMPERATURE = 0.3
FLASHCARD_COUNT_DEFAULT = 15
FLASHCARD_COUNT_MAX = 50
FLASHCARD_CONTEXT_CHARS = 16000
FLASHCARD_SYSTEM_PROMPT = "You output only valid JSON arrays. No extra prose."
FLASHCARD_INSTRUCTIONS = (
    "You create compact, high-yield flashcards from a transcript or summary.\n"
    'Return 10-20 items as JSON: [{ "q": "...", "a": "..." }, ...]. Keep language simple and precise.\n'
    "Avoid duplicates. Prefer single-point recall over long paragraphs."
)
FLASHCARD_PARSE_FALLBACK = {"q": "Unable to parse", "a": "Try regenerating."}
