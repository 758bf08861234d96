from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal

from pydantic import BaseModel, Field

MIN_COLUMN_WIDTH = 4


class Verdict(str, Enum):
    MATCH = "match"
    DIFF = "diff"


class DiffRow(BaseModel):
    index: int
    expected: str = ""
    actual: str = ""

    @property
    def differing(self) -> bool:
        return self.expected != self.actual


class ComparisonResult(BaseModel):
    verdict: Verdict
    rows: List[DiffRow] = Field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.verdict is Verdict.MATCH

    @property
    def differing_rows(self) -> List[DiffRow]:
        return [r for r in self.rows if r.differing]


class RunnerConfig(BaseModel):
    style: Literal["unified", "table"] = "unified"
    width: int = 38
    verbose: bool = True
    keep_artifacts: bool = False
    strict: bool = False
    timeout_s: int = 10
    build_dir: str = "."
    # {"cpp": {"build": "...", "run": "..."}}
    toolchains: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    @property
    def column_width(self) -> int:
        return max(self.width, MIN_COLUMN_WIDTH)
