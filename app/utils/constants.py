"""Application-wide constants."""

API_PREFIX = "/api"

# Media upload limits
MAX_MEDIA_SIZE_MB = 25
MAX_MEDIA_SIZE_BYTES = MAX_MEDIA_SIZE_MB * 1024 * 1024  # 25MB

ALLOWED_MEDIA_TYPES = [
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "video/mp4",
    "video/webm",
    "application/pdf",
]

# Presigned URL expiration (in seconds)
PRESIGNED_URL_EXPIRATION = 3600  # 1 hour

# Website generation
DEFAULT_PRIMARY_COLOR = "#3B82F6"
DEFAULT_SECTIONS = ["hero", "features", "about", "testimonials", "pricing", "contact", "footer"]
GENERATION_MAX_TOKENS = 16000
CREATE_TEMPERATURE = 0.8
SECTION_EDIT_TEMPERATURE = 0.6

# Placeholder cost model: tokens are estimated from prompt length
TOKENS_PER_PROMPT_CHAR = 1.5

# Requests slower than this are logged as warnings
SLOW_REQUEST_THRESHOLD_SECONDS = 0.5
