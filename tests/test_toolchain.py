import sys

from cfr.toolchain import plan_for, render_command


def test_compiled_language_plan(tmp_path):
    tmp_path = tmp_path.resolve()
    src = tmp_path / "sol.cpp"
    plan = plan_for("cpp", str(src), build_dir=str(tmp_path))

    assert plan.needs_build
    assert plan.build == ["g++", "-o", str(tmp_path / "sol"), str(src)]
    assert plan.run == [str(tmp_path / "sol")]
    assert plan.artifacts == [str(tmp_path / "sol")]


def test_java_plan_cleans_class_file(tmp_path):
    tmp_path = tmp_path.resolve()
    src = tmp_path / "Main.java"
    plan = plan_for("java", str(src), build_dir=str(tmp_path))

    assert plan.build[0] == "javac"
    assert plan.run == ["java", "-cp", str(tmp_path), "Main"]
    assert plan.artifacts == [str(tmp_path / "Main.class")]


def test_python_needs_no_build(tmp_path):
    tmp_path = tmp_path.resolve()
    src = tmp_path / "sol.py"
    plan = plan_for("python", str(src), build_dir=str(tmp_path))

    assert not plan.needs_build
    assert plan.run == [sys.executable, str(src)]
    assert plan.artifacts == []


def test_overrides_replace_templates(tmp_path):
    tmp_path = tmp_path.resolve()
    src = tmp_path / "sol.cpp"
    overrides = {"cpp": {"build": "clang++ -O2 -std=c++17 -o {{ exe }} {{ source }}"}}
    plan = plan_for("cpp", str(src), build_dir=str(tmp_path), overrides=overrides)

    assert plan.build[:3] == ["clang++", "-O2", "-std=c++17"]
    assert plan.run == [str(tmp_path / "sol")]


def test_paths_with_spaces_stay_one_argument(tmp_path):
    tmp_path = tmp_path.resolve()
    argv = render_command("cat {{ source }}", {"source": tmp_path / "my dir" / "a b.txt"})
    assert argv == ["cat", str(tmp_path / "my dir" / "a b.txt")]
