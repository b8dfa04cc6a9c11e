"""Development entry point: ``python app.py`` or ``flask --app app run``."""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
for path in (REPO_ROOT, REPO_ROOT / "src" / "comedor"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from comedor.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG", False)))
