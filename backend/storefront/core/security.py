
from passlib.context import CryptContext


# 与用户表 password 列配合：只落库 bcrypt 哈希
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def needs_rehash(hashed_password: str) -> bool:
    """bcrypt 轮数调高后，旧哈希在下次登录时可重算"""
    return pwd_context.needs_update(hashed_password)
