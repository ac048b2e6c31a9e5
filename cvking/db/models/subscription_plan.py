import uuid
from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, JSON
from cvking.db.base import Base


class SubscriptionPlan(Base):
    __tablename__ = "subscription_plans"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    plan_type = Column("planType", String(20), nullable=False, index=True)  # FREE | PREMIUM
    price = Column(Numeric(10, 2), default=0)
    billing_cycle = Column("billingCycle", String(20), default="MONTHLY")
    max_jobs = Column("maxJobs", Integer, default=1)
    max_applications = Column("maxApplications", Integer, default=10)
    features = Column(JSON, nullable=True, default=list)
    is_active = Column("isActive", Boolean, default=True)
    sort_order = Column("sortOrder", Integer, default=0)

    def __repr__(self):
        return f"<SubscriptionPlan(name='{self.name}', plan_type='{self.plan_type}')>"
