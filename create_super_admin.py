"""
Create (or reset the password of) a platform super admin.
Usage: python create_super_admin.py --email admin@example.com --first-name Ada --last-name Perera
The password is read from SUPER_ADMIN_PASSWORD or prompted for.
"""
import argparse
import getpass
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.database import Base, SessionLocal, engine
from app.models import SuperAdmin
from app.security_utils import hash_password
from app.shared.validators import validate_password

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def create_super_admin(email: str, first_name: str, last_name: str, password: str, phone: str = None):
    """Insert the super admin, or update the password of an existing one"""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    try:
        admin = db.query(SuperAdmin).filter(SuperAdmin.email == email.lower()).first()
        if admin:
            admin.password_hash = hash_password(password)
            admin.is_active = True
            logger.info(f"🔑 Super admin {email} already exists - password reset")
        else:
            admin = SuperAdmin(
                email=email.lower(),
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                phone=phone,
            )
            db.add(admin)
            logger.info(f"✅ Super admin {email} created")
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a Dream Weddings super admin")
    parser.add_argument("--email", default=os.getenv("SUPER_ADMIN_EMAIL"))
    parser.add_argument("--first-name", default=os.getenv("SUPER_ADMIN_FIRST_NAME", "Super"))
    parser.add_argument("--last-name", default=os.getenv("SUPER_ADMIN_LAST_NAME", "Admin"))
    parser.add_argument("--phone", default=os.getenv("SUPER_ADMIN_PHONE"))
    args = parser.parse_args()

    if not args.email:
        logger.error("An email is required (--email or SUPER_ADMIN_EMAIL)")
        sys.exit(1)

    password = os.getenv("SUPER_ADMIN_PASSWORD") or getpass.getpass("Password: ")
    try:
        validate_password(password)
    except ValueError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    create_super_admin(args.email, args.first_name, args.last_name, password, args.phone)
