"""Constants used throughout the application."""

# Keyword heuristic tuning
MIN_KEYWORD_LENGTH = 3  # tokens must be strictly longer than this
MAX_SIMILAR_CONCEPTS = 10

# Risk level thresholds on overall similarity (percent)
HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 30

# Gemini request settings
GEMINI_TEMPERATURE = 0.2
RESPONSE_MIME_TYPE = "application/json"

KEYWORD_SUGGESTIONS = [
    "Consider adding more specific technical details to your project",
    "Highlight unique features that differentiate your solution",
    "Include innovative approaches or methodologies you're using",
]

DEGRADED_ANALYSIS_SUGGESTION = (
    "Uniqueness analysis is currently unavailable. "
    "Please make sure your project description is original."
)

# Failure categories reported when the AI comparison fails
FAILURE_AUTH = "auth"
FAILURE_FORBIDDEN = "forbidden"
FAILURE_QUOTA = "quota"
FAILURE_OTHER = "other"
