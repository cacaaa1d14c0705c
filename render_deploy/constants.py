"""Global constants for render-deploy"""

APP_NAME = "render-deploy"
LOG_FORMAT = "%(message)s"

# Project identification
CONFIG_FILE = ".render-deploy.yaml"
DEFAULT_SOURCE_DIR = "trip-planner"
STAGING_DIR_PREFIX = "render-deploy-"

# Render service defaults
DESCRIPTOR_FILE = "render.yaml"
DEFAULT_SERVICE_NAME = "trip-planner"
DEFAULT_SERVICE_TYPE = "web"
DEFAULT_SERVICE_ENV = "python"
DEFAULT_BUILD_COMMAND = "pip install -r requirements.txt"
DEFAULT_START_COMMAND = "uvicorn app.main:app --host 0.0.0.0 --port $PORT"
DEFAULT_API_HOST = "0.0.0.0"

# Environment variable names written into the service descriptor
ENV_WEATHERBIT_API_KEY = "WEATHERBIT_API_KEY"
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_USE_MOCK_DATA = "USE_MOCK_DATA"
ENV_API_HOST = "API_HOST"
ENV_API_PORT = "API_PORT"

# Placeholder data written into the staged application
DATA_DIR = "app/data"
DATA_FILES = {
    "mock_weather_data.json": {},
    "mock_accommodations.json": {},
    "mock_equipment.json": {},
    "mock_embeddings_cache.json": {},
    "destination_embeddings.json": [],
}

# GitHub
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITHUB_WEB_URL = "https://github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
DEFAULT_HTTP_TIMEOUT = 30  # seconds
GITHUB_BAD_CREDENTIALS = "Bad credentials"
GITHUB_NAME_EXISTS = "name already exists"

# Git
DEFAULT_COMMIT_MESSAGE = "Initial commit for Render deployment"
DEFAULT_PUSH_BRANCHES = ["master", "main"]
DEFAULT_REMOTE_NAME = "origin"
MIN_GIT_VERSION = "1.7.0"  # push --set-upstream

# Operator guidance
RENDER_DASHBOARD_URL = "https://dashboard.render.com/select-repo?type=web"
FRONTEND_URL_VARIABLE = "TRIP_PLANNER_URL"
DEFAULT_FRONTEND_URL = "https://trip-planner.onrender.com"
FRONTEND_ROUTE = "/trip-planner"

# Environment variables
ENV_CONFIG_PATH = "RENDER_DEPLOY_CONFIG"
ENV_GITHUB_USERNAME = "RENDER_DEPLOY_GITHUB_USERNAME"
ENV_GITHUB_REPOSITORY = "RENDER_DEPLOY_GITHUB_REPOSITORY"
ENV_GITHUB_TOKEN = "RENDER_DEPLOY_GITHUB_TOKEN"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "RD001"
    PREREQUISITE_MISSING = "RD002"
    STAGING_FAILED = "RD003"
    GIT_COMMAND_FAILED = "RD004"
    PUSH_FAILED = "RD005"
    REPOSITORY_ERROR = "RD006"
    BAD_CREDENTIALS = "RD007"
    USER_CANCELLED = "RD008"


# Display constants
EMOJI_SUCCESS = "✓"

# Prompts
PROMPT_WEATHERBIT_KEY = "Enter your WeatherBit API key (or press Enter to use mock data)"
PROMPT_OPENAI_KEY = "Enter your OpenAI API key (or press Enter to use mock data)"
PROMPT_GITHUB_USERNAME = "Enter your GitHub username"
PROMPT_GITHUB_REPOSITORY = "Enter a name for your new GitHub repository"
PROMPT_GITHUB_TOKEN = "Enter your GitHub personal access token (with repo permissions)"
