#!/usr/bin/env python3
"""
WasteWise Backend - Run Script
This script starts the FastAPI backend server for local development
"""

import os
import sys
import subprocess
from pathlib import Path

REQUIRED_ENV_VARS = ("GOOGLE_CLOUD_VISION_CREDENTIALS", "GOOGLE_MAPS_API_KEY")

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

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def missing_env_vars(env_path):
    """Names from REQUIRED_ENV_VARS set neither in the environment nor in the .env file"""
    defined = set(k for k in REQUIRED_ENV_VARS if os.environ.get(k))
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            key, _, value = line.partition("=")
            if key.strip() in REQUIRED_ENV_VARS and value.strip():
                defined.add(key.strip())
    return [k for k in REQUIRED_ENV_VARS if k not in defined]

def main():
    print_colored("🚀 Starting WasteWise Backend...", "blue")

    # Check if we're in the project root
    check_file_exists("wastewise/main.py", "wastewise/main.py not found. Please run this script from the project root.")

    missing = missing_env_vars(Path(".env"))
    if missing:
        print_colored("⚠️  Warning: some credentials are not configured.", "yellow")
        print("Add the following variables to .env or the environment:")
        for key in missing:
            print(f"  {key}=...")
        print("The server will start, but classification or venue lookup may fail.")
        print()

    # Check if virtual environment is activated
    if not os.environ.get('VIRTUAL_ENV'):
        print_colored("⚠️  Virtual environment not activated.", "yellow")
        print("Please activate your virtual environment first:")
        print("  source venv/bin/activate  # On macOS/Linux")
        print("  venv\\Scripts\\activate     # On Windows")
        sys.exit(1)

    # Check if dependencies are installed
    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi
        import uvicorn
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Installing dependencies...")
        subprocess.run([sys.executable, "-m", "pip", "install", "-e", "."], check=True)

    port = os.environ.get("PORT", "3000")

    # Start the server
    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Backend will be available at: http://localhost:{port}")
    print(f"📍 API Health check: http://localhost:{port}/api/health")
    print(f"📍 API Documentation: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    # Run uvicorn with auto-reload for development
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "wastewise.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
