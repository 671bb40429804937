# config.py

import os
from dotenv import load_dotenv

load_dotenv()

# -------------------------------------------------
# Dataset
# -------------------------------------------------
DATA_PATH = os.getenv("HEALTH_DATA_CSV", os.path.join("data", "Data_Cleaned.csv"))

START_YEAR = 2000
END_YEAR = 2023

# -------------------------------------------------
# Gemini
# -------------------------------------------------
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
LLM_TEMPERATURE = 0.2
LLM_MAX_OUTPUT_TOKENS = 2048

# -------------------------------------------------
# Outputs / server
# -------------------------------------------------
REPORT_DIR = os.path.join("outputs", "reports")

API_HOST = os.getenv("HEALTH_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("HEALTH_API_PORT", "8000"))

SESSION_USER_KEY = "whd-username"
