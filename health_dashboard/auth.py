"""
Front-end-only account screens. Nothing here checks a real account store:
the validators only decide whether a form can be submitted.
"""

from typing import Optional


def validate_login(username: str, password: str) -> Optional[str]:
    if not (username or "").strip() or not (password or "").strip():
        return "Please enter both a username (or email) and a password to continue."
    return None


def passwords_mismatch(password: str, confirm: str) -> bool:
    password = password or ""
    confirm = confirm or ""
    return bool(password.strip()) and bool(confirm.strip()) and password != confirm


def validate_registration(full_name: str, email: str, password: str, confirm: str) -> Optional[str]:
    if not (full_name or "").strip() or not (email or "").strip() or not (password or "").strip():
        return "Please fill in your name, email address and a password."
    if password != confirm:
        return "Passwords do not match."
    return None


def validate_reset(email: str, new_password: str, confirm: str) -> Optional[str]:
    if not (email or "").strip() or not (new_password or "").strip():
        return "Please enter your email address and a new password."
    if passwords_mismatch(new_password, confirm):
        return "Passwords do not match."
    return None


def validate_forgot(email: str) -> Optional[str]:
    if not (email or "").strip():
        return "Please enter the email address associated with your account."
    return None
