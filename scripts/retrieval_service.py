from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv(ROOT / ".env")

import uvicorn

from logging_config import setup_logging
from retrieval.app import create_app


setup_logging()
app = create_app()

uvicorn.run(app, host="0.0.0.0", port=8000)
