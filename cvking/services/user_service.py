"""
User account maintenance: listing, password patches and seed accounts.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import update
from sqlalchemy.orm import Session

from cvking.db.models.user import User
from cvking.db.models.job_seeker_profile import JobSeekerProfile

logger = logging.getLogger(__name__)

PASSWORD_PREVIEW_LENGTH = 20
DEFAULT_PROFILE_COMPLETION = 20

# Example accounts the CVKing backend ships with
DEFAULT_USERS = [
    {"email": "admin@example.com", "first_name": "Admin", "last_name": "User"},
    {"email": "employer@example.com", "first_name": "John", "last_name": "Employer"},
    {"email": "hr@example.com", "first_name": "Sarah", "last_name": "HR"},
    {"email": "jobseeker@example.com", "first_name": "Mike", "last_name": "Developer"},
]
DEFAULT_USER_EMAILS = [u["email"] for u in DEFAULT_USERS]


@dataclass
class UserSummary:
    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    password_preview: str

    def describe(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return f"{self.email} - {name} - Password starts with: {self.password_preview}..."


def list_users(db: Session) -> List[UserSummary]:
    """Return every user with only the first characters of the password hash."""
    users = db.query(User).order_by(User.email).all()
    return [
        UserSummary(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password_preview=(user.password or "")[:PASSWORD_PREVIEW_LENGTH],
        )
        for user in users
    ]


def update_passwords(db: Session, emails: Sequence[str], password_hash: str) -> int:
    """
    Set the same password hash on every listed account.

    Returns:
        Number of rows updated; unknown emails are skipped
    """
    if not emails:
        return 0
    try:
        result = db.execute(
            update(User)
            .where(User.email.in_([email.lower() for email in emails]))
            .values(password=password_hash)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Updated password for {result.rowcount} of {len(emails)} user(s)")
    return result.rowcount


def seed_default_users(db: Session, password_hash: str, users: Optional[Sequence[dict]] = None) -> List[User]:
    """
    Create the example accounts, or refresh password and names if they exist.
    """
    users = users if users is not None else DEFAULT_USERS
    seeded = []
    try:
        for data in users:
            email = data["email"].lower()
            user = db.query(User).filter(User.email == email).first()
            if user:
                logger.info(f"Refreshing existing user: {email}")
                user.password = password_hash
                user.first_name = data.get("first_name")
                user.last_name = data.get("last_name")
            else:
                logger.info(f"Creating user: {email}")
                user = User(
                    email=email,
                    password=password_hash,
                    first_name=data.get("first_name"),
                    last_name=data.get("last_name"),
                    status="active",
                    is_active=True,
                )
                db.add(user)
            seeded.append(user)
        db.commit()
    except Exception:
        db.rollback()
        raise

    for user in seeded:
        db.refresh(user)
    return seeded


def ensure_job_seeker_profile(
    db: Session,
    email: str,
    completion: int = DEFAULT_PROFILE_COMPLETION,
) -> Tuple[JobSeekerProfile, bool]:
    """
    Make sure a user has a job seeker profile.

    Returns:
        (profile, created) where created is False if one already existed

    Raises:
        LookupError: If no user has this email
    """
    user = db.query(User).filter(User.email == email.lower()).first()
    if not user:
        raise LookupError(f"User {email} not found")

    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user.id).first()
    if profile:
        logger.info(f"Job seeker profile already exists: {profile.id}")
        return profile, False

    profile = JobSeekerProfile(user_id=user.id, profile_completion=completion)
    try:
        db.add(profile)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(profile)
    logger.info(f"Created job seeker profile {profile.id} for user {user.id}")
    return profile, True
