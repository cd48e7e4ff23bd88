# mcqbank/utils/config.py
from typing import Dict, List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    # Question source and UI
    mcq_data_dir: str = "data/mcqs"
    static_dir: str = "public"  # Served at "/" when the directory exists

    # --- Server ---
    api_prefix: str = "/api"  # Set to "" to serve routes without a prefix
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # --- Request defaults ---
    default_page_size: int = 10
    default_random_count: int = 10
    default_finals_count: int = 50
    default_lessons_page_size: int = 1000  # Large so clients get the full catalog

    # --- Sampling ---
    # Subjects selectable on /mcqs/random; "both" combines all of them in this order
    random_subjects: List[str] = ["pharmacology", "pathology"]
    # Finals composition: subject -> share of the requested count
    finals_ratio: Dict[str, float] = {"pharmacology": 0.5, "pathology": 0.5}

    @field_validator("finals_ratio")
    @classmethod
    def validate_finals_ratio(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Each ratio must lie in (0, 1]; they need not sum to 1."""
        for subject, ratio in v.items():
            if not 0 < ratio <= 1:
                raise ValueError(f"Finals ratio for '{subject}' must be in (0, 1], got {ratio}")
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

settings = Settings()
