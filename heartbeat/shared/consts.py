from enum import Enum

DEFAULT_HEARTBEAT_ROUTE = "/api/heartbeat"
DEFAULT_API_KEY_HEADER_KEY = "DiagnosticsAPIKey"

# Context keys attached to heartbeat log records
HEARTBEAT_SCOPE = "heartbeat"
EXECUTION_TIME_SCOPE = "execution_time_ms"
STATUS_CODE_SCOPE = "status_code"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
