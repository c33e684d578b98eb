import numpy as np
import pytest

from regularized_regression import ConjugateGradient, GradientDescent, Regression


@pytest.mark.parametrize("optimizer", [ConjugateGradient(), GradientDescent(lr=0.1, tol=1e-10)])
def test_linear_fit_recovers_slope(line_model, optimizer):
    theta = line_model.theta
    optimizer.minimize(line_model, 0.0, 20000)

    assert line_model.theta is theta
    assert line_model.theta == pytest.approx([0.0, 2.0], abs=1e-3)
    assert line_model.cost_function(0.0, calc_grad=False)[0] == pytest.approx(0.0, abs=1e-6)
    assert optimizer.n_iter_ > 0


@pytest.mark.parametrize("optimizer", [ConjugateGradient(), GradientDescent()])
def test_zero_iterations_is_a_no_op(line_model, optimizer):
    line_model.theta[:] = [0.5, 0.5]
    optimizer.minimize(line_model, 0.0, 0)
    assert line_model.theta.tolist() == [0.5, 0.5]
    assert optimizer.n_iter_ == 0


def test_gradient_descent_stops_at_tolerance(line_model):
    optimizer = GradientDescent(lr=0.1, tol=1e-3)
    optimizer.minimize(line_model, 0.0, 100000)
    assert optimizer.n_iter_ < 100000


def test_gradient_descent_regularization_shrinks_weights(random_data):
    X, y = random_data
    plain = Regression(X, y)
    shrunk = Regression(X, y)
    GradientDescent(lr=0.1).minimize(plain, 0.0, 2000)
    GradientDescent(lr=0.1).minimize(shrunk, 10.0, 2000)
    assert np.linalg.norm(shrunk.theta[1:]) < np.linalg.norm(plain.theta[1:])


def test_gradient_descent_verbose(line_model, capsys):
    GradientDescent(lr=0.01, tol=0.0).minimize(line_model, 0.0, 1000, verbose=True)
    out = capsys.readouterr().out
    assert "[GD] step=500" in out
    assert "[GD] step=1000" in out


def test_conjugate_gradient_verbose(line_model, capsys):
    ConjugateGradient().minimize(line_model, 0.0, 50, verbose=True)
    assert "[CG] lambda=0.0" in capsys.readouterr().out


def test_dimension_errors_propagate():
    model = Regression([[1, 1], [1, 2]], [1, 2, 3])
    with pytest.raises(ValueError, match="row/label count mismatch"):
        ConjugateGradient().minimize(model, 0.0, 10)
    with pytest.raises(ValueError, match="row/label count mismatch"):
        GradientDescent().minimize(model, 0.0, 10)


def test_conjugate_gradient_skips_zero_width_theta():
    model = Regression([], [])
    optimizer = ConjugateGradient()
    optimizer.minimize(model, 0.0, 10)
    assert model.theta.size == 0
    assert optimizer.n_iter_ == 0
