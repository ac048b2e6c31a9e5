"""
Database models module.

Imports every model so they are registered on Base.metadata. The schema
itself is owned by the CVKing backend; these models only map the columns
the maintenance scripts read and write.
"""
from cvking.db.models.user import User
from cvking.db.models.company import Company
from cvking.db.models.job import Job
from cvking.db.models.application import Application
from cvking.db.models.job_seeker_profile import JobSeekerProfile
from cvking.db.models.cv import CV
from cvking.db.models.subscription_plan import SubscriptionPlan

# Every table in cvking_db, in the order the data check reports them
KNOWN_TABLES = [
    "users",
    "roles",
    "user_roles",
    "companies",
    "employer_profiles",
    "job_seeker_profiles",
    "job_seeker_education",
    "job_seeker_experience",
    "job_seeker_skills",
    "skills",
    "job_categories",
    "jobs",
    "job_skills",
    "job_tags",
    "job_job_tags",
    "applications",
    "application_events",
    "saved_jobs",
    "blogs",
    "blog_tags",
    "blog_post_tags",
    "blog_comments",
    "notifications",
    "messages",
    "message_threads",
    "thread_participants",
    "conversations",
    "cvs",
    "cv_templates",
    "files",
    "payments",
    "subscriptions",
    "subscription_plans",
    "hr_company_relationships",
]

__all__ = [
    "User",
    "Company",
    "Job",
    "Application",
    "JobSeekerProfile",
    "CV",
    "SubscriptionPlan",
    "KNOWN_TABLES",
]
