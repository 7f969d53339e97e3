"""
Script to create test data for development
"""
import sys
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from hrportal.core.database import SessionLocal, init_db
from hrportal.auth.service import get_password_hash
from hrportal.candidates.repository import CandidateRepository
from hrportal.demands.repository import DemandRepository
from hrportal.users.repository import UserRepository
import structlog

logger = structlog.get_logger()

TEST_CANDIDATES = [
    {
        "name": "Asha Rao",
        "email": "asha.rao@example.com",
        "mobile": "+91 98450 11111",
        "location": "Bangalore, India",
        "visa_status": "Not Required",
        "experience": "6 years",
        "current_role": "Embedded Engineer",
        "skills": ["Embedded Systems", "C", "IoT", "PCB Design"],
        "salary": "₹18 LPA",
        "notice_period": "30 days",
        "education": "B.E. Electronics",
    },
    {
        "name": "Rahul Mehta",
        "email": "rahul.mehta@example.com",
        "mobile": "+91 98200 22222",
        "location": "Pune, India",
        "visa_status": "H1B",
        "experience": "3 years",
        "current_role": "Backend Developer",
        "skills": "Python, Django, PostgreSQL",
        "status": "Interviewing",
        "salary": "₹12 LPA",
        "notice_period": "60 days",
        "education": "B.Tech Computer Science",
    },
    {
        "name": "Meera Iyer",
        "email": "meera.iyer@example.com",
        "mobile": "+91 99000 33333",
        "location": "Bangalore, India",
        "visa_status": "Not Required",
        "experience": "11 years",
        "current_role": "Solution Architect",
        "skills": ["java", "Spring Boot", "iot", "AWS"],
        "salary": "₹35 LPA",
        "notice_period": "90 days",
        "education": "M.Tech",
    },
    {
        "name": "Karthik Subramanian",
        "email": "karthik.s@example.com",
        "mobile": "+91 94440 44444",
        "location": "Chennai, India",
        "visa_status": "L1",
        "experience": "1 year",
        "current_role": "Graduate Engineer",
        "skills": '["Python", "IoT", "Raspberry Pi"]',
        "status": "Not Available",
        "salary": "₹6 LPA",
        "education": "B.E. ECE",
    },
]

TEST_DEMANDS = [
    {
        "client_name": "Acme Automotive",
        "country": "Germany",
        "location": "Munich",
        "created_date": date.today() - timedelta(weeks=5),
        "exp_from": 5,
        "exp_to": 8,
        "job_priority": "High",
        "primary_skill": ["Embedded Systems", "AUTOSAR"],
        "secondary_skill": ["Python"],
        "recruiter_poc": "Priya",
        "job_description": "Embedded engineer for ECU software",
    },
    {
        "client_name": "Northwind Health",
        "country": "India",
        "location": "Bangalore",
        "created_date": date.today() - timedelta(days=3),
        "exp_from": 2,
        "exp_to": 4,
        "job_priority": "Low",
        "primary_skill": ["Java", "Spring Boot"],
        "recruiter_poc": "Arjun",
        "job_description": "Backend developer for claims platform",
    },
]


def create_test_user(db: Session):
    users = UserRepository(db)
    if users.exists("recruiter"):
        logger.info("test_user_exists", username="recruiter")
        return
    users.create("recruiter", get_password_hash("recruiter123"), "HR")


def create_test_candidates(db: Session):
    candidates = CandidateRepository(db)
    for data in TEST_CANDIDATES:
        if candidates.email_exists(data["email"]):
            logger.info("test_candidate_exists", email=data["email"])
            continue
        candidates.create(data)


def create_test_demands(db: Session):
    demands = DemandRepository(db)
    if demands.list_all():
        logger.info("test_demands_exist")
        return
    for data in TEST_DEMANDS:
        demands.create(data)


def main():
    init_db()
    db = SessionLocal()
    try:
        create_test_user(db)
        create_test_candidates(db)
        create_test_demands(db)
        logger.info("test_data_created")
    except Exception as e:
        logger.error("test_data_creation_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
