# cfr/sandbox.py
import subprocess, time, threading, psutil
from typing import List, Dict, Any, Optional, IO

from .errors import ExecutionError


def run(
    cmd: List[str],
    cwd: Optional[str] = None,
    timeout_s: int = 30,
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
) -> Dict[str, Any]:
    """
    Runs `cmd` and waits for it. stdout goes to the given file handle, or is
    captured when none is given; stderr is always captured.
    Returns: rc, stdout, stderr, time_s, peak_mb
    """
    start = time.perf_counter()
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=cwd,
            stdin=stdin if stdin is not None else subprocess.DEVNULL,
            stdout=stdout if stdout is not None else subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        raise ExecutionError(f"executable not found: {cmd[0]}") from e

    peak_mb = 0.0
    stop_flag = False

    def monitor():
        nonlocal peak_mb
        try:
            p = psutil.Process(proc.pid)
        except psutil.Error:
            return
        while not stop_flag:
            try:
                rss = p.memory_info().rss / (1024 * 1024)
                if rss > peak_mb:
                    peak_mb = rss
            except psutil.Error:
                break
            time.sleep(0.05)

    t = threading.Thread(target=monitor, daemon=True)
    t.start()

    try:
        out, err = proc.communicate(timeout=timeout_s)
        rc = proc.returncode
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.communicate()
        out, err, rc = "", "TIMEOUT", -9
    finally:
        stop_flag = True
        t.join(timeout=0.2)

    wall = time.perf_counter() - start
    return {"rc": rc, "stdout": out or "", "stderr": err or "", "time_s": wall, "peak_mb": peak_mb}
