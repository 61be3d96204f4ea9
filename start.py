"""Simple launcher for Navietta.

This script asks whether you want the Gradio web UI or the JSON API,
then starts the corresponding server with the project's virtualenv.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from navietta.config import get_config


def main() -> None:
    project_root = Path(__file__).resolve().parent

    print("=== Navietta launcher ===")
    print("1) Web UI   (apps/app.py)")
    print("2) JSON API (navietta.api)")
    choice = input("Choice (1/2, ui/api): ").strip().lower()

    venv_python = project_root / ".venv" / "bin" / "python"
    if not venv_python.exists():
        venv_python = project_root / ".venv" / "Scripts" / "python.exe"
    python_exe = str(venv_python) if venv_python.exists() else sys.executable

    if choice in {"2", "api", "a"}:
        server = get_config().server
        cmd = [
            python_exe,
            "-m",
            "uvicorn",
            "navietta.api:create_app",
            "--factory",
            "--host",
            server.host,
            "--port",
            str(server.port),
        ]
    else:
        if choice not in {"1", "ui", "u"}:
            print("Unrecognised choice, starting the web UI.")
        script_path = project_root / "apps" / "app.py"
        if not script_path.exists():
            print("Cannot find apps/app.py at the project root.")
            sys.exit(1)
        cmd = [python_exe, str(script_path)]

    print(f"Starting with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False, cwd=project_root)


if __name__ == "__main__":
    main()
