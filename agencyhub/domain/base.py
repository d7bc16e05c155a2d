from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form DateTime columns are stored and compared in."""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_email(email: str) -> str:
    return email.strip().lower()
