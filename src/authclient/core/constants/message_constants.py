"""Constants for user-facing and log messages.

Kept in one place so the notification fallbacks and the test suite agree.
"""

# Notification fallbacks
GENERIC_ERROR_TITLE = "Error"
GENERIC_ERROR_DESCRIPTION = "Something went wrong"
NOTIFICATION_SEVERITY_ERROR = "error"

# Transport error messages
NETWORK_CONNECTION_ERROR = "Network connection error: {error}"
REQUEST_FAILED_ERROR = "{method} {path} failed with status {status_code}"
INVALID_REQUEST_ERROR = "Cannot build request {method} {path}: {error}"
MALFORMED_ENVELOPE_ERROR = "Malformed response envelope from {method} {path}: {error}"

# Session error messages
REFRESH_FAILED_ERROR = "Session refresh failed: {error}"
SESSION_INTERCEPTOR_KEY = "session"

# Configuration error messages
CONFIG_INVALID_BASE_URL_ERROR = "Invalid API base URL: {value!r}"
