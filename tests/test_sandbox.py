import sys

import pytest

from cfr.errors import ExecutionError
from cfr.sandbox import run


def test_captures_stdout_and_rc():
    res = run([sys.executable, "-c", "print('hi')"])
    assert res["rc"] == 0
    assert res["stdout"] == "hi\n"
    assert res["time_s"] > 0
    assert res["peak_mb"] >= 0.0


def test_redirects_stdin_and_stdout(tmp_path):
    inp = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    inp.write_text("3 4\n", encoding="utf-8")
    code = "a, b = map(int, input().split()); print(a + b)"
    with open(inp) as fin, open(out, "w") as fout:
        res = run([sys.executable, "-c", code], stdin=fin, stdout=fout)
    assert res["rc"] == 0
    assert out.read_text(encoding="utf-8") == "7\n"


def test_nonzero_exit_and_stderr():
    res = run([sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"])
    assert res["rc"] == 3
    assert "boom" in res["stderr"]


def test_timeout_kills_child():
    res = run([sys.executable, "-c", "import time; time.sleep(10)"], timeout_s=1)
    assert res["rc"] == -9
    assert res["stderr"] == "TIMEOUT"


def test_missing_executable():
    with pytest.raises(ExecutionError):
        run(["definitely-not-a-real-compiler-xyz"])
