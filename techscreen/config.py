"""
Techscreen Configuration System
===============================

This file contains ALL configuration for the techscreen pipelines.
- User settings at the top (things users might want to change)
- Internal constants at the bottom (technical defaults)
"""
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


# =============================================================================
# USER SETTINGS - Edit these to customize behavior
# =============================================================================

# REQUIRED: Set your Google Cloud project
GOOGLE_CLOUD_PROJECT = "your-project-id"  # Change this!
GOOGLE_APPLICATION_CREDENTIALS = None  # Optional: path to credentials JSON

# Logging
LOG_FILE = "./_techscreen/techscreen.log"
LOG_LEVEL = "INFO"


# =============================================================================
# INTERNAL CONSTANTS - Don't change these unless you know what you're doing
# =============================================================================

# LLM
VERTEX_LOCATION = "us-central1"
MODEL_NAME = "gemini-2.5-flash"
LLM_TIMEOUT = 60
MAX_OUTPUT_TOKENS = 2048

# Resume text normalization
ENCODED_SLICE_CHARS = 200_000
MIN_PRINTABLE_CHARS = 100
PLACEHOLDER_SAMPLE_CHARS = 10_000

# Question set shape
QUESTION_COUNT = 6
DIFFICULTY_PLAN: Tuple[str, ...] = ("easy", "easy", "medium", "medium", "hard", "hard")

# Seconds allowed per answer, owned by the interview layer
DIFFICULTY_TIME_LIMITS: Dict[str, int] = {
    "easy": 20,
    "medium": 60,
    "hard": 120,
}


# =============================================================================
# MAIN CONFIG OBJECT
# =============================================================================

@dataclass
class Config:
    """Main configuration object."""
    google_cloud_project: str
    google_application_credentials: Optional[str] = None
    vertex_location: str = VERTEX_LOCATION
    model_name: str = MODEL_NAME
    llm_timeout: int = LLM_TIMEOUT
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL


def get_config() -> Config:
    """Load configuration."""
    project = os.getenv("GOOGLE_CLOUD_PROJECT") or GOOGLE_CLOUD_PROJECT
    credentials = os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or GOOGLE_APPLICATION_CREDENTIALS

    if project == "your-project-id":
        raise ValueError("Please set GOOGLE_CLOUD_PROJECT in config.py or as environment variable")

    return Config(
        google_cloud_project=project,
        google_application_credentials=credentials,
        vertex_location=os.getenv("TECHSCREEN_LOCATION") or VERTEX_LOCATION,
        model_name=os.getenv("TECHSCREEN_MODEL") or MODEL_NAME,
        log_file=os.getenv("TECHSCREEN_LOG_FILE") or LOG_FILE,
        log_level=os.getenv("TECHSCREEN_LOG_LEVEL") or LOG_LEVEL,
    )
