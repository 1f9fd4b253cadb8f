import pytest

from repocheck.dsl import drift, matrix, pipeline, sh
from repocheck.model import Step


def test_sh_splits_string_commands():
    step = sh("Run clippy", "cargo clippy -- -D warnings")
    assert step.run == ("cargo", "clippy", "--", "-D", "warnings")
    assert step.kind == "sh"
    assert step.cwd is None


def test_sh_keeps_argv_as_given():
    step = sh("Integration", ["./integration/scripts/check"], cwd="sub dir")
    assert step.run == ("./integration/scripts/check",)
    assert step.cwd == "sub dir"
    assert step.cmd == "./integration/scripts/check"


def test_drift_step_records_artifact():
    step = drift("CSS", "yarn run build", artifact="assets/out.css", cwd="compile-assets")
    assert step.kind == "drift"
    assert step.data == {"artifact": "assets/out.css"}
    assert step.run == ("yarn", "run", "build")


def test_empty_command_is_rejected():
    with pytest.raises(ValueError, match="empty command"):
        sh("nothing", "")


def test_steps_are_immutable():
    step = sh("fmt", "cargo fmt -- --check")
    with pytest.raises(AttributeError):
        step.name = "other"


def test_matrix_builds_one_step_per_value():
    steps = matrix("features", [[], ["--no-default-features"]]).steps(
        lambda v: sh(f"test {v}", ["cargo", "test", *v])
    )
    assert [s.run for s in steps] == [
        ("cargo", "test"),
        ("cargo", "test", "--no-default-features"),
    ]


def test_pipeline_flattens_in_order():
    a, b, c = sh("a", "true"), sh("b", "true"), sh("c", "true")
    assert pipeline(a, [b, c]) == [a, b, c]
    assert all(isinstance(s, Step) for s in pipeline(a, [b], c))


def test_pipeline_requires_steps():
    with pytest.raises(ValueError, match="at least one step"):
        pipeline()
    with pytest.raises(ValueError):
        pipeline([])


def test_pipeline_rejects_duplicate_names():
    with pytest.raises(ValueError, match="Duplicate step name: lint"):
        pipeline(sh("lint", "yarn run lint"), sh("lint", "cargo clippy"))


def test_drift_steps_are_hashable():
    step = drift("CSS", "yarn run build", artifact="assets/out.css")
    assert step in {step}
    assert hash(step) == hash(drift("CSS", "yarn run build", artifact="assets/out.css"))
