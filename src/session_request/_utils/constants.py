# Environment variables
ENV_REQUEST_TIMEOUT = "SESSION_REQUEST_TIMEOUT"
ENV_SESSION_COOKIE = "SESSION_REQUEST_SESSION_COOKIE"
ENV_USER_AGENT = "SESSION_REQUEST_USER_AGENT"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"

# Auth type escalation
AUTH_TYPE_FIELD = "os_authType"
AUTH_TYPE_BASIC = "basic"

# Request defaults
DEFAULT_DATA_TYPE = "json"
DEFAULT_METHOD = "GET"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "session-request/0.1.0"

# Status text passed to the success/error continuations
STATUS_TEXT_SUCCESS = "success"
STATUS_TEXT_ERROR = "error"
STATUS_TEXT_TIMEOUT = "timeout"
STATUS_TEXT_PARSER_ERROR = "parsererror"

AUTH_FAILURE_STATUS_CODES = frozenset({401})
