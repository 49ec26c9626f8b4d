"""
Provider endpoints and orchestration limits.
"""

# Anthropic Messages API
ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_API_VERSION = "2023-06-01"

# OpenAI Chat Completions API
OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"

# Follow-up rounds allowed after the first response while tools are requested
MAX_TOOL_ROUNDS = 5

DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_MESSAGE_HISTORY = 10

# Seconds
DEFAULT_REQUEST_TIMEOUT = 60.0

UNEXPECTED_RESPONSE_FORMAT = "unexpected response format"

# Environment variables read by LLMConfig.from_env
ENV_PREFIX = "RELAY_LLM_"
PROVIDER_API_KEY_ENV_VARS = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}
