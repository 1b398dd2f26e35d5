"""Configuration management for API."""

from dataclasses import dataclass
import os


@dataclass
class Config:
    # MongoDB Configuration
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongodb_db: str = os.getenv("MONGODB_DB", "interviewAI")
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # API Server Configuration
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "3000"))
    api_debug: bool = os.getenv("API_DEBUG", "False").lower() == "true"

    # CORS Configuration
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Single-page application
    static_dir: str = os.getenv("STATIC_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "public"))

    # Password hashing
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Seed question bank and demo account on startup
    seed_on_startup: bool = os.getenv("SEED_ON_STARTUP", "True").lower() == "true"

    def validate(self) -> bool:
        """
        Validate configuration settings.

        Returns:
            True if all validations pass, False otherwise
        """
        ok = True

        if not self.mongodb_db:
            print("⚠️  ERROR: MONGODB_DB is empty")
            ok = False

        # bcrypt only accepts cost factors in this range
        if not 4 <= self.bcrypt_rounds <= 31:
            print(f"⚠️  ERROR: BCRYPT_ROUNDS must be between 4 and 31 (got {self.bcrypt_rounds})")
            ok = False

        if not os.path.isfile(os.path.join(self.static_dir, "index.html")):
            print(f"⚠️  WARNING: index.html not found in {self.static_dir}")
            ok = False

        if not self.api_debug:
            if "localhost" in self.mongodb_uri or "127.0.0.1" in self.mongodb_uri:
                print("⚠️  WARNING: MONGODB_URI points to localhost in production mode")

        return ok


config = Config()
