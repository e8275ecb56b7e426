# mcqgen/config.py
import os

from dotenv import load_dotenv

load_dotenv()

# ----------------------------
# Model client
# ----------------------------
PROVIDER = os.environ.get("MCQ_PROVIDER", "ollama")
MODEL_BASE_URL = os.environ.get("MCQ_MODEL_BASE_URL", "http://69.57.160.76:11434")
MODEL_NAME = os.environ.get("MCQ_MODEL", "llama2")
TEMPERATURE = float(os.environ["MCQ_TEMPERATURE"]) if os.environ.get("MCQ_TEMPERATURE") else None
# no timeout unless configured
LLM_TIMEOUT = float(os.environ["MCQ_LLM_TIMEOUT"]) if os.environ.get("MCQ_LLM_TIMEOUT") else None
LLM_RETRIES = int(os.environ.get("MCQ_LLM_RETRIES", 0))

# ----------------------------
# Generation / persistence
# ----------------------------
VALIDATION = os.environ.get("MCQ_VALIDATION", "trust")  # "trust" | "strict"
OUTPUT_PATH = os.environ.get("MCQ_OUTPUT_PATH", "./mcqs.json")
DEBUG = os.environ.get("MCQ_DEBUG", "").lower() in ("1", "true", "yes")
LOG_DIR = os.environ.get("AI_BACKEND_LOG_DIR", "./ai_backend_logs")

# ----------------------------
# Server
# ----------------------------
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3000))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
