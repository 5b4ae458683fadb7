from __future__ import annotations

import json
import os
import random
import string
from datetime import datetime, timezone
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict


def utc_now_iso() -> str:
    """Current UTC time, seconds precision, e.g. 2026-01-01T00:00:00+00:00."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def new_run_id() -> str:
    """YYYYMMDD_HHMMSS_<rand4> in UTC, safe as a folder name."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=4))
    return f"{ts}_{suffix}"


def prepare_run_dir(out_dir: str | Path, run_id: str) -> Path:
    run_dir = Path(out_dir) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def write_run_meta(run_dir: Path, meta: Dict[str, Any]) -> Path:
    """Write run_meta.json via a temp file in run_dir, then replace."""
    path = Path(run_dir) / "run_meta.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile("w", encoding="utf-8", dir=path.parent, delete=False) as tmp:
        json.dump(meta, tmp, ensure_ascii=False, indent=2)
        tmp.write("\n")
        tmp_path = Path(tmp.name)
    os.replace(tmp_path, path)
    return path
