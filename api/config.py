from dotenv import load_dotenv
import os

load_dotenv()

LOG_LEVEL = os.getenv("CSV_INSIGHT_LOG_LEVEL", "INFO").upper()
MAX_UPLOAD_BYTES = int(os.getenv("CSV_INSIGHT_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
PREVIEW_DEFAULT_ROWS = int(os.getenv("CSV_INSIGHT_PREVIEW_DEFAULT_ROWS", "5"))
PREVIEW_MAX_ROWS = int(os.getenv("CSV_INSIGHT_PREVIEW_MAX_ROWS", "500"))
HISTOGRAM_BINS = int(os.getenv("CSV_INSIGHT_HISTOGRAM_BINS", "10"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CSV_INSIGHT_CORS_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("CSV_INSIGHT_HOST", "127.0.0.1")
PORT = int(os.getenv("CSV_INSIGHT_PORT", "8000"))
