# blogapi/utils/validators.py
import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")

USERNAME_MIN, USERNAME_MAX = 3, 30
PASSWORD_MIN = 6

STRENGTH_LABELS = ["Very Weak", "Weak", "Fair", "Good", "Strong", "Very Strong"]

# (regla, mensaje cuando no se cumple)
STRENGTH_RULES = [
    (lambda p: len(p) >= 8, "At least 8 characters"),
    (lambda p: re.search(r"[A-Z]", p), "One uppercase letter"),
    (lambda p: re.search(r"[a-z]", p), "One lowercase letter"),
    (lambda p: re.search(r"[0-9]", p), "One number"),
    (lambda p: re.search(r"[^A-Za-z0-9]", p), "One special character"),
]


def validate_username(username):
    """Devuelve un mensaje de error o None."""
    if not username:
        return "Username is required"
    if len(username) < USERNAME_MIN:
        return f"Username must be at least {USERNAME_MIN} characters"
    if len(username) > USERNAME_MAX:
        return f"Username cannot exceed {USERNAME_MAX} characters"
    if not USERNAME_PATTERN.match(username):
        return "Username can only contain letters, numbers, and underscores"
    return None


def validate_email(email):
    if not email:
        return "Email is required"
    if not EMAIL_PATTERN.match(email):
        return "Please include a valid email"
    return None


def validate_password(password):
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN:
        return f"Password must be at least {PASSWORD_MIN} characters"
    return None


def check_password_strength(password):
    password = password or ""
    score = 0
    feedback = []
    for rule, message in STRENGTH_RULES:
        if rule(password):
            score += 1
        else:
            feedback.append(message)
    return {
        "score": score,
        "label": STRENGTH_LABELS[score],
        "feedback": feedback or ["Strong password!"],
    }
