from sqlalchemy.orm import Session
from storefront.core.logging import configure_logging, get_logger
from storefront.db.session import SessionLocal
from storefront.repository import role_repo, user_repo


# 在容器里运行一次：python -m scripts.create_admin_user
# （需先 `alembic upgrade head`；PYTHONPATH 指向 backend）

ADMIN_ROLE_ID = "admin"
ADMIN_ROLE_NAME = "Administrator"


def main():
    configure_logging()
    logger = get_logger("scripts.admin")
    db: Session = SessionLocal()
    try:
        email = "admin@storefront.local"
        password = "admin123"  # 改成你自己的
        if user_repo.get_by_email(db, email):
            logger.info("User exists: %s", email)
            return

        role = role_repo.get_by_role_id(db, ADMIN_ROLE_ID)
        if role is None:
            role = role_repo.create_role(db, ADMIN_ROLE_ID, ADMIN_ROLE_NAME)
        user_repo.create_user(db, user_name="Admin", email=email, password=password, role_pk=role.id, status=1)
        logger.info("Admin created: %s (role=%s)", email, role.role_id)
    finally:
        db.close()

if __name__ == "__main__":
    main()
