"""
Demand (job requisition) models
"""
from sqlalchemy import Column, Integer, String, Text, Date, JSON
from hrportal.core.database import Base


class Demand(Base):
    """Demand model"""

    __tablename__ = "demands"

    id = Column(Integer, primary_key=True, autoincrement=False)
    client_name = Column(String(255), default="")
    country = Column(String(100), default="")
    location = Column(String(255), default="")
    created_date = Column(Date, index=True)

    # Experience range in years
    exp_from = Column(Integer, default=0)
    exp_to = Column(Integer, default=0)

    interviewer1 = Column(String(255), default="")
    interviewer2 = Column(String(255), default="")
    job_description = Column(Text, default="")
    job_priority = Column(String(20), default="Medium")  # High, Medium, Low
    primary_skill = Column(JSON)  # List of skills
    secondary_skill = Column(JSON)  # List of skills
    recruiter_poc = Column(String(255), default="")
    status = Column(String(20), default="Active")  # Active, Inactive

    def to_dict(self):
        """camelCase record as served to clients"""
        return {
            "id": self.id,
            "clientName": self.client_name,
            "country": self.country,
            "location": self.location,
            "createdDate": self.created_date.isoformat() if self.created_date else None,
            "expFrom": self.exp_from,
            "expTo": self.exp_to,
            "interviewer1": self.interviewer1,
            "interviewer2": self.interviewer2,
            "jobDescription": self.job_description,
            "jobPriority": self.job_priority,
            "primarySkill": self.primary_skill or [],
            "secondarySkill": self.secondary_skill or [],
            "recruiterPOC": self.recruiter_poc,
            "status": self.status,
        }
