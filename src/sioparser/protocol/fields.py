"""Protocol constants.

Keep these in one place to avoid stringly-typed packet handling.
"""

# Placeholder object fields
PLACEHOLDER = "isPlaceholder"
INDEX = "index"

# Frame grammar delimiters
NAMESPACE_PREFIX = "/"
NAMESPACE_END = ","
ATTACHMENTS_END = "-"

DEFAULT_NAMESPACE = "/"

# Event names with a special meaning; never valid as user event names.
CONNECT = "connect"                 # client side
CONNECT_ERROR = "connect_error"     # client side
DISCONNECT = "disconnect"           # both sides
DISCONNECTING = "disconnecting"     # server side

RESERVED_EVENTS = frozenset((CONNECT, CONNECT_ERROR, DISCONNECT, DISCONNECTING))
