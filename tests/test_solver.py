import pytest

from tabquad import QuadratureSolver, QuadratureSpec, InputError, ParityError
from tabquad.solver import DEFAULT_METHODS


SQUARES = ([0, 1, 2, 3, 4], [0, 1, 4, 9, 16])


def test_solve_reports_inputs_and_outputs():
    spec = QuadratureSpec(*SQUARES, methods=("trapezoidal", "simpson"))
    result = QuadratureSolver(spec).solve()
    assert result["inputs"] == {
        "n": 5,
        "points": [0.0, 1.0, 2.0, 3.0, 4.0],
        "values": [0.0, 1.0, 4.0, 9.0, 16.0],
        "methods": ["trapezoidal", "simpson"],
    }
    assert list(result["outputs"]) == ["trapezoidal", "simpson"]
    assert result["outputs"]["simpson"] == pytest.approx(64 / 3)


def test_summary_rounds_outputs():
    spec = QuadratureSpec(*SQUARES, methods=("simpson", "trapezoidal"))
    outputs = QuadratureSolver(spec).summary()["outputs"]
    assert outputs == {"simpson": 21.3, "trapezoidal": 22.0}


def test_summary_digits():
    spec = QuadratureSpec(*SQUARES, methods=("simpson",), digits=3)
    assert QuadratureSolver(spec).summary()["outputs"]["simpson"] == pytest.approx(21.333)


def test_default_methods_run_all_rules():
    spec = QuadratureSpec([0, 1, 2, 3], [0, 1, 8, 27], methods=DEFAULT_METHODS[:4] + ("newton",))
    outputs = QuadratureSolver(spec).solve()["outputs"]
    assert outputs["newton"] == pytest.approx(20.25)
    assert len(outputs) == 5


def test_failing_rule_propagates():
    with pytest.raises(InputError):
        QuadratureSolver(QuadratureSpec(*SQUARES)).solve()


def test_iter_results_stops_at_failure():
    solver = QuadratureSolver(QuadratureSpec([0, 2], [3, 3]))
    seen = []
    with pytest.raises(ParityError):
        for name, value in solver.iter_results():
            seen.append((name, value))
    assert seen == [
        ("left_rectangle", 6.0),
        ("middle_rectangle", 6.0),
        ("right_rectangle", 6.0),
        ("trapezoidal", 6.0),
    ]


def test_unknown_method():
    with pytest.raises(InputError):
        QuadratureSolver(QuadratureSpec(*SQUARES, methods=("romberg",)))


def test_negative_digits():
    with pytest.raises(InputError):
        QuadratureSolver(QuadratureSpec(*SQUARES, digits=-1))


def test_mismatched_table():
    with pytest.raises(InputError):
        QuadratureSolver(QuadratureSpec([0, 1], [1, 2, 3]))


def test_spec_to_dict():
    spec = QuadratureSpec([0, 1], [1, 1])
    assert spec.to_dict() == {
        "points": [0, 1],
        "values": [1, 1],
        "methods": DEFAULT_METHODS,
        "digits": 1,
    }
