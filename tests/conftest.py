import os
import sys
import tempfile
from pathlib import Path

# Ensure the backend package and frontend modules are importable for direct pytest runs
ROOT = Path(__file__).resolve().parents[1]
for subdir in ("backend", "frontend"):
    path = str(ROOT / subdir)
    if path not in sys.path:
        sys.path.insert(0, path)

# Keep test runs from writing logs into the working tree
os.environ.setdefault("LOG_DIRECTORY", tempfile.mkdtemp(prefix="weather-greeter-logs-"))
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-key")
