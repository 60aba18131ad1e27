# app/config.py
import os
import logging
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    # 🌱 App
    app_title: str = os.getenv("APP_TITLE", "Smart Crop - Soil Analysis Engine")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # ⏳ simulated analysis latency; 0 answers immediately
    analysis_delay_ms: int = int(os.getenv("ANALYSIS_DELAY_MS", "0"))

settings = Settings()

def setup_logging(level: str | None = None):
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
