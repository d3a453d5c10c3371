"""
RatePolicy ORM Model
Single-row table holding the marketplace minimum wage
"""
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric
from sqlalchemy.sql import func

from core.database import Base


RATE_POLICY_ROW_ID = 1


class RatePolicyModel(Base):
    __tablename__ = "rate_policies"

    id = Column(Integer, primary_key=True, default=RATE_POLICY_ROW_ID)
    min_wage_per_hour = Column(Numeric(12, 2), nullable=False)
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("id = 1", name="ck_rate_policies_singleton"),
        CheckConstraint("min_wage_per_hour > 0", name="ck_rate_policies_positive"),
    )

    def __repr__(self):
        return f"<RatePolicyModel {self.min_wage_per_hour}/hour>"
