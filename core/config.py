from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings


load_dotenv()


class AppSettings(BaseSettings):
    # Pydantic v2 settings configuration

    mongo_uri: Optional[str] = Field(default=None, alias="MONGO_URI")
    # Atlas-style credentials, used only when MONGO_URI is not set
    db_user: Optional[str] = Field(default=None, alias="DB_USER")
    db_pass: Optional[str] = Field(default=None, alias="DB_PASS")
    mongo_cluster_host: Optional[str] = Field(default=None, alias="MONGO_CLUSTER_HOST")
    # Accept MONGO_DB_NAME (preferred) or DATABASE_NAME (legacy)
    database_name: str = Field(
        default="service-booking",
        validation_alias=AliasChoices("MONGO_DB_NAME", "DATABASE_NAME"),
    )
    services_collection: str = Field(default="services", alias="SERVICES_COLLECTION")
    bookings_collection: str = Field(default="bookings", alias="BOOKINGS_COLLECTION")

    # Driver timeouts; store calls fail instead of hanging past these
    mongo_server_selection_timeout_ms: int = Field(
        default=5000, alias="MONGO_SERVER_SELECTION_TIMEOUT_MS"
    )
    mongo_connect_timeout_ms: int = Field(default=5000, alias="MONGO_CONNECT_TIMEOUT_MS")
    mongo_socket_timeout_ms: int = Field(default=10000, alias="MONGO_SOCKET_TIMEOUT_MS")

    # Auth / JWT
    jwt_secret_key: str = Field(default="dev-secret", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    allowed_origins: str = Field(default="*", alias="ALLOWED_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=3000, alias="PORT")

    environment: Literal["development", "production", "test"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @property
    def resolved_mongo_uri(self) -> str:
        if self.mongo_uri:
            return self.mongo_uri
        if self.db_user and self.db_pass and self.mongo_cluster_host:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.mongo_cluster_host}/?retryWrites=true&w=majority"
            )
        return "mongodb://localhost:27017"


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()
