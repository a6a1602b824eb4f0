"""Skill Prestige — dev launcher. Starts the API server in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13015")


def main():
    parser = argparse.ArgumentParser(description="Skill Prestige dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Save data directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Clean and create demo save data")
    args = parser.parse_args()

    data_dir = args.data_dir or Path(os.getenv("DATA_DIR", str(ROOT / "data")))
    if args.demo:
        from skill_prestige.demo import create_demo_data
        from skill_prestige.storage import Storage
        create_demo_data(Storage(data_dir))

    # Build env for the server so it picks up the same data dir
    env = os.environ.copy()
    env["DATA_DIR"] = str(data_dir.resolve())

    print(f"Starting API on http://localhost:{PORT} ...")
    proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "skill_prestige.app:create_app", "--factory",
         "--reload", "--host", HOST, "--port", PORT],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
