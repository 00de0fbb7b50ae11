"""Policy defaults shared by configuration and the rule set."""

MIN_PASSWORD_LENGTH = 8
MAX_REPEAT_RUN = 3
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[]{};:'\",.<>/?\\|`~"

# Upper bound accepted by the API; the rules themselves have no limit.
MAX_PASSWORD_INPUT_LENGTH = 1024
