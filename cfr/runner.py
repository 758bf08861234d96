# cfr/runner.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .comparator import compare
from .errors import BuildError, ExecutionError, MissingFileError
from .languages import resolve_language
from .render import Renderer, make_renderer
from .sandbox import run
from .toolchain import ToolchainPlan, plan_for
from .types import ComparisonResult, RunnerConfig


def check_inputs(*paths) -> None:
    for p in paths:
        if not Path(p).exists():
            raise MissingFileError(p)


def read_output(path) -> str:
    """
    Raw file contents as text: no newline translation, and undecodable bytes
    kept as surrogate escapes so two different byte sequences never compare equal.
    """
    return Path(path).read_bytes().decode("utf-8", errors="surrogateescape")


def _cleanup(plan: ToolchainPlan) -> None:
    for artifact in plan.artifacts:
        Path(artifact).unlink(missing_ok=True)
    for pattern in plan.artifact_globs:
        for p in Path(plan.build_dir).glob(pattern):
            p.unlink(missing_ok=True)


def build(plan: ToolchainPlan, config: RunnerConfig) -> None:
    if not plan.needs_build:
        if config.verbose:
            print(f"[build] {plan.label} doesn't require compilation.")
        return

    if config.verbose:
        print(f"[build] Compiling {plan.label}...")
    res = run(plan.build, cwd=config.build_dir, timeout_s=max(config.timeout_s, 60))
    # compiler output (warnings included) always reaches the terminal
    if res["stdout"]:
        print(res["stdout"], end="")
    if res["stderr"]:
        print(res["stderr"], end="", file=sys.stderr)
    if res["rc"] != 0:
        raise BuildError(f"compilation failed (exit status {res['rc']})", stderr=res["stderr"])


def execute(plan: ToolchainPlan, input_file, output_file, config: RunnerConfig) -> dict:
    if config.verbose:
        print("[run] Executing...")
    with open(input_file, "rb") as fin, open(output_file, "wb") as fout:
        res = run(plan.run, cwd=config.build_dir, timeout_s=config.timeout_s, stdin=fin, stdout=fout)

    if res["stderr"] and res["stderr"] != "TIMEOUT":
        print(res["stderr"], end="", file=sys.stderr)
    if res["rc"] == -9 and res["stderr"] == "TIMEOUT":
        raise ExecutionError(f"execution timed out after {config.timeout_s}s", stderr=res["stderr"])
    if res["rc"] != 0:
        raise ExecutionError(f"execution failed (exit status {res['rc']})", stderr=res["stderr"])
    if config.verbose:
        print(f"[run] rc={res['rc']} time={res['time_s']:.3f}s peak={res['peak_mb']:.1f}MB")
    return res


def compile_and_run(
    source,
    input_file,
    output_file,
    expected_file,
    config: Optional[RunnerConfig] = None,
    language: Optional[str] = None,
    renderer: Optional[Renderer] = None,
) -> ComparisonResult:
    """
    Builds `source`, feeds it `input_file`, stores its stdout in `output_file`
    and compares that against `expected_file`. Build artifacts are removed
    afterwards unless config.keep_artifacts is set.
    """
    config = config or RunnerConfig()
    check_inputs(source, input_file, expected_file)

    lang = resolve_language(source, language)
    Path(config.build_dir).mkdir(parents=True, exist_ok=True)
    plan = plan_for(lang, str(source), build_dir=config.build_dir, overrides=config.toolchains)

    if config.verbose:
        print(f"[paths] source={Path(source).resolve()} language={lang}")

    try:
        build(plan, config)
        execute(plan, input_file, output_file, config)

        if config.verbose:
            print("[compare] Comparing outputs...")
        actual = read_output(output_file)
        expected = read_output(expected_file)

        result = compare(expected, actual)
        renderer = renderer or make_renderer(config.style, width=config.column_width)
        if result.matched:
            renderer.message("Output matches the expected output!")
        else:
            renderer.message("Output differs from expected:")
            renderer.render(result.rows)
        return result
    finally:
        if not config.keep_artifacts:
            _cleanup(plan)
