from __future__ import annotations

import shutil
import subprocess
from typing import Sequence


def has_binary(name: str) -> bool:
    return shutil.which(name) is not None


def run_process(
    cmd: Sequence[str],
    *,
    capture_output: bool = True,
    text: bool = True,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        list(cmd),
        check=check,
        capture_output=capture_output,
        text=text,
    )
