from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_email(email: str) -> str:
    """Addresses match case-insensitively; stored and compared lowercased"""
    return email.strip().lower()
