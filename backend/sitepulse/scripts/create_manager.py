import argparse
import logging
from datetime import date

from sitepulse.core.security import hash_password
from sitepulse.database.base import Base
from sitepulse.database.session import SessionLocal, engine
from sitepulse.models.user import User
from sitepulse.utils.generator import generate_employee_id

logger = logging.getLogger(__name__)


def create_manager(username: str, email: str, password: str, session_factory=SessionLocal) -> User | None:
    """Seed the first manager account so somebody can approve leave."""
    db = session_factory()
    try:
        existing = db.query(User).filter(
            (User.username == username) | (User.email == email)
        ).first()
        if existing:
            logger.info("User %s already exists", existing.username)
            return None

        manager = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role="Manager",
            joining_date=date.today(),
            employee_id=generate_employee_id(),
        )
        db.add(manager)
        db.commit()
        db.refresh(manager)
        logger.info("Manager %s created", manager.username)
        return manager
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the initial manager account")
    parser.add_argument("--username", default="manager")
    parser.add_argument("--email", default="manager@company.com")
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    create_manager(args.username, args.email, args.password)


if __name__ == "__main__":
    main()
