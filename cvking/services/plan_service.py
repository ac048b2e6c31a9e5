"""
Read-only checks over subscription plans.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from cvking.db.models.subscription_plan import SubscriptionPlan

logger = logging.getLogger(__name__)

FREE_PLAN_TYPE = "FREE"


def list_plans(db: Session) -> List[SubscriptionPlan]:
    return db.query(SubscriptionPlan).order_by(SubscriptionPlan.sort_order, SubscriptionPlan.name).all()


def get_free_plans(db: Session) -> List[SubscriptionPlan]:
    """Active plans of type FREE; new accounts need at least one."""
    plans = (
        db.query(SubscriptionPlan)
        .filter(SubscriptionPlan.plan_type == FREE_PLAN_TYPE, SubscriptionPlan.is_active.is_(True))
        .order_by(SubscriptionPlan.sort_order)
        .all()
    )
    if not plans:
        logger.warning("No active FREE subscription plan found")
    return plans


def plan_to_dict(plan: SubscriptionPlan) -> dict:
    return {
        "id": plan.id,
        "name": plan.name,
        "planType": plan.plan_type,
        "price": float(plan.price) if plan.price is not None else None,
        "billingCycle": plan.billing_cycle,
        "maxJobs": plan.max_jobs,
        "maxApplications": plan.max_applications,
        "features": plan.features or [],
        "isActive": plan.is_active,
    }
