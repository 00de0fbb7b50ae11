"""Reference data — known-weak passwords.

Entries are matched exactly (case-sensitive) against the full candidate.
The list favours the most frequently leaked passwords that would otherwise
slip through the length rule.
"""

# ──────────────────────────────────────────────────────────────────────
# COMMON PASSWORDS
# ──────────────────────────────────────────────────────────────────────

COMMON_PASSWORDS: frozenset[str] = frozenset({
    # Numeric sequences
    "123456",
    "1234567",
    "12345678",
    "123456789",
    "1234567890",
    "111111",
    "000000",
    "654321",
    "123123",

    # Keyboard walks
    "qwerty",
    "qwerty123",
    "qwertyuiop",
    "1q2w3e4r",
    "asdfghjkl",
    "zaq12wsx",

    # Words and phrases
    "password",
    "password1",
    "password123",
    "Password1",
    "passw0rd",
    "letmein",
    "iloveyou",
    "welcome",
    "welcome1",
    "admin",
    "admin123",
    "monkey",
    "dragon",
    "football",
    "baseball",
    "sunshine",
    "princess",
    "trustno1",
    "superman",
    "abc123",
})
