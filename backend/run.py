#!/usr/bin/env python3
"""
Weather Greeter Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def main():
    print_colored("🚀 Starting Weather Greeter Backend...", "blue")

    if not Path("weather_greeter/main.py").exists():
        print_colored("❌ Error: weather_greeter/main.py not found. Please run this script from the backend directory.", "red")
        sys.exit(1)

    if not (Path(".env").exists() or Path("../.env").exists()) and not os.environ.get("GOOGLE_MAPS_API_KEY"):
        print_colored("⚠️  Warning: no .env file and GOOGLE_MAPS_API_KEY is not set.", "yellow")
        print("Place photos will not load. Create a .env file with:")
        print("  GOOGLE_MAPS_API_KEY=your_api_key_here")
        print("  LLM_PROVIDER=mistral")
        print("  MISTRAL_API_KEY=your_api_key_here")
        print("  LOGGER=20")

    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi  # noqa: F401
        import uvicorn  # noqa: F401
    except ImportError:
        print_colored("❌ Dependencies not installed. Run: pip install -e .", "red")
        sys.exit(1)

    print_colored("✅ All checks passed!", "green")
    print("📍 Backend will be available at: http://localhost:8000")
    print("📍 API Health check: http://localhost:8000/health")
    print("📍 API Documentation: http://localhost:8000/docs")
    print()
    print("Press Ctrl+C to stop the server")

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "weather_greeter.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8000"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
