from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "eCommerce API"
    DATABASE_URL: str = "sqlite:///./ecommerce.db"
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS512"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 10 # 10 days

    # Registration
    MIN_PASSWORD_LENGTH: int = 7

    # Cart
    MAX_CART_QUANTITY: int = 1000

    # Load the default catalog on startup when the item table is empty
    SEED_CATALOG: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
