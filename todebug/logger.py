from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from . import config
from .core.render import to_debug


class PrettyLogger:
    def __init__(self, log_dir: Optional[str] = None, filename: Optional[str] = None):
        self.log_path = Path(log_dir or config.LOG_DIR) / (filename or config.LOG_FILE)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, label: str, data: Any):
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(f"\n{'─'*60}\n")
            f.write(f"⏱  {datetime.now().strftime('%H:%M:%S')}  │  {label}\n")
            f.write(f"{'─'*60}\n\n")

            if isinstance(data, Mapping):
                for key, value in data.items():
                    rendered = to_debug(value)
                    if len(rendered) > 100:
                        # Long values get their own block
                        f.write(f"📌 {key}:\n\n{to_debug(value, pretty=True)}\n\n")
                    else:
                        f.write(f"• {key}: {rendered}\n")
            else:
                f.write(f"{to_debug(data, pretty=True)}\n")

            f.write("\n")

    def clear(self):
        self.log_path.write_text("", encoding="utf-8")
