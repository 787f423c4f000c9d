#!/usr/bin/env python3
"""
Development startup script.

Starts the discount service in development mode.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists."""
    env_file = PROJECT_ROOT / "config" / ".env"
    env_example = PROJECT_ROOT / "config" / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created config/.env from example")
        return True
    else:
        print("✗ No configuration file found")
        return False


def start_service(port: int = 8002):
    """Start the discount service with auto-reload."""
    print(f"\n🏷️  Starting Discount Service on http://localhost:{port} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "discount_service.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", str(port),
        ],
        cwd=PROJECT_ROOT,
        env={**os.environ},
    )

    print("\n" + "=" * 60)
    print(f"📍 Discount API: http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Service stopped.")


def main():
    print("=" * 60)
    print("Discount Service - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    if not check_env():
        sys.exit(1)

    print("\n✓ All checks passed!")

    start_service(int(os.getenv("PORT", "8002")))


if __name__ == "__main__":
    main()
