"""End-to-end tests running the heroine as a process."""

import os
import signal
import subprocess
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]


def _start_module() -> subprocess.Popen:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT_DIR), env.get("PYTHONPATH")]))
    return subprocess.Popen(
        [sys.executable, "-m", "heroine_state"],
        cwd=ROOT_DIR,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals required")
class TestProcess:
    """Run ``python -m heroine_state`` and stop it with a signal."""

    @pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
    def test_signal_stops_cleanly(self, signum):
        proc = _start_module()
        try:
            first_line = proc.stdout.readline()
            proc.send_signal(signum)
            remaining, _ = proc.communicate(timeout=10)
        finally:
            if proc.poll() is None:
                proc.kill()
                proc.wait()

        assert first_line == "walking\n"
        assert proc.returncode == 0
        assert set(remaining.splitlines()) <= {"walking", "Jumping"}
