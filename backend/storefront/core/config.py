# 环境变量和配置
# pydantic-settings 读取 .env = core/config.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# 本机直接跑（不走 Docker）时，才会用到 model_config.env_file=".env"

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # ========= project config =========
    PROJECT_NAME: str = "Storefront"
    ENVIRONMENT: str = Field("development", alias="ENVIRONMENT")   # development / test / production


    # ========= Database =========
    # 说明：
    # - 容器内默认连 docker 网络里的 "db" 服务
    DATABASE_URL: str = Field(
        default="postgresql+psycopg://store_user:store_pass@db:5432/storefront_dev",
        alias="DATABASE_URL",
    )
    DB_POOL_SIZE: int = Field(10, ge=1, alias="DB_POOL_SIZE")              # 常驻连接
    DB_MAX_OVERFLOW: int = Field(20, ge=0, alias="DB_MAX_OVERFLOW")        # 高峰期额外连接
    DB_POOL_RECYCLE: int = Field(1800, ge=30, alias="DB_POOL_RECYCLE")     # 秒
    DB_ECHO: bool = Field(False, alias="DB_ECHO")                          # 调试可设为 True


    # ========= logging =========
    LOG_LEVEL: str = Field("INFO", alias="LOG_LEVEL")


    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()  # 只从环境读取（含 .env）
