"""
Database configuration
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from pathlib import Path

env_path = Path(__file__).parent.parent.parent / ".env"

STORE_BACKENDS = ("postgres", "memory")

class DatabaseConfig(BaseSettings):
    """Database configuration"""
    
    # Which message store backs the data layer: postgres or memory
    store_backend: str = Field(default="postgres", alias="MESSAGE_STORE_BACKEND")
    
    host: str = Field(default="localhost", alias="DB_HOST")
    port: int = Field(default=5432, alias="DB_PORT")
    database: str = Field(default="chat", alias="DB_NAME")
    username: str = Field(default="postgres", alias="DB_USER")
    password: str = Field(default="postgres", alias="DB_PASSWORD")
    messages_table: str = Field(default="chat_messages", alias="DB_MESSAGES_TABLE")
    
    # Connection pool configuration
    min_connections: int = Field(default=1, alias="DB_MIN_CONNECTIONS")
    max_connections: int = Field(default=10, alias="DB_MAX_CONNECTIONS")
    connection_timeout: int = Field(default=30, alias="DB_CONNECTION_TIMEOUT")

    model_config = {
        "env_file": env_path,
        "env_file_encoding": "utf-8",
        "extra": "allow"  # Allow extra fields
    }
    
    @field_validator("store_backend")
    @classmethod
    def validate_store_backend(cls, v):
        backend = v.strip().lower()
        if backend not in STORE_BACKENDS:
            raise ValueError(f"MESSAGE_STORE_BACKEND must be one of {STORE_BACKENDS}")
        return backend
    
    @property
    def database_url(self) -> str:
        """Build database URL"""
        return f"postgresql://{self.username}:{self.password}@{self.host}:{self.port}/{self.database}"

database_config = DatabaseConfig()
