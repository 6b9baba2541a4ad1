from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    DATABASE_URL: str
    POOL_MIN_SIZE: int = 1
    POOL_MAX_SIZE: int = 10
    CREATE_SCHEMA: bool = True


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    HOST: str = '0.0.0.0'
    PORT: int = 3000
    LOG_LEVEL: str = 'INFO'
