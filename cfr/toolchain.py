# cfr/toolchain.py
# Build/run command lines per language, rendered from jinja2 templates.
from __future__ import annotations

import glob
import shlex
import sys
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Template
from pydantic import BaseModel, Field

# build=None -> interpreted, nothing to compile
DEFAULT_TOOLCHAINS: Dict[str, Dict[str, Optional[str]]] = {
    "go": {
        "build": "go build -o {{ exe }} {{ source }}",
        "run": "{{ exe }}",
        "label": "Go",
    },
    "cpp": {
        "build": "g++ -o {{ exe }} {{ source }}",
        "run": "{{ exe }}",
        "label": "C++",
    },
    "c": {
        "build": "gcc -o {{ exe }} {{ source }}",
        "run": "{{ exe }}",
        "label": "C",
    },
    "rust": {
        "build": "rustc -o {{ exe }} {{ source }}",
        "run": "{{ exe }}",
        "label": "Rust",
    },
    "java": {
        "build": "javac -d {{ build_dir }} {{ source }}",
        "run": "java -cp {{ build_dir }} {{ base }}",
        "label": "Java",
    },
    "python": {
        "build": None,
        "run": "{{ python }} {{ source }}",
        "label": "Python",
    },
}


class ToolchainPlan(BaseModel):
    language: str
    label: str
    build: Optional[List[str]] = None
    run: List[str]
    artifacts: List[str] = Field(default_factory=list)
    # patterns relative to build_dir, matched at cleanup time
    artifact_globs: List[str] = Field(default_factory=list)
    build_dir: str = "."

    @property
    def needs_build(self) -> bool:
        return self.build is not None


def render_command(template: str, context: dict) -> List[str]:
    # every value is quoted so paths with spaces survive shlex.split
    quoted = {k: shlex.quote(str(v)) for k, v in context.items()}
    return shlex.split(Template(template).render(**quoted))


def plan_for(
    language: str,
    source: str,
    build_dir: str = ".",
    overrides: Optional[Dict[str, Dict[str, str]]] = None,
) -> ToolchainPlan:
    spec = dict(DEFAULT_TOOLCHAINS[language])
    spec.update((overrides or {}).get(language, {}))

    src = Path(source).resolve()
    bdir = Path(build_dir).resolve()
    base = src.stem
    exe = bdir / base
    context = {
        "source": src,
        "source_dir": src.parent,
        "build_dir": bdir,
        "base": base,
        "exe": exe,
        "python": sys.executable,
    }

    build = render_command(spec["build"], context) if spec.get("build") else None
    artifact_globs = []
    if language == "java":
        artifacts = [str(bdir / f"{base}.class")]
        # nested and anonymous classes: Main$Inner.class, Main$1.class
        artifact_globs = [glob.escape(base) + "$*.class"]
    elif build is not None:
        artifacts = [str(exe)]
    else:
        artifacts = []

    return ToolchainPlan(
        language=language,
        label=spec.get("label") or language,
        build=build,
        run=render_command(spec["run"], context),
        artifacts=artifacts,
        artifact_globs=artifact_globs,
        build_dir=str(bdir),
    )
