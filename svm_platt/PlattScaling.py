#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import warnings
from dataclasses import dataclass
import numpy as np
from scipy.optimize import OptimizeResult, least_squares

from svm_platt.errors import LengthMismatch, OptimizerNonConvergence

log = logging.getLogger(__name__)

_Z_CLIP = 500.0

def sigmoid_apply(f: np.ndarray, A: float, B: float) -> np.ndarray:
	"""p = 1 / (1 + exp(A·f + B)), elementwise."""
	z = A * np.asarray(f, dtype=float) + B
	return 1.0 / (1.0 + np.exp(np.clip(z, -_Z_CLIP, _Z_CLIP)))

def logistic_jacobian(f: np.ndarray, AB: np.ndarray) -> np.ndarray:
	# dp/dz = -p(1 - p), z = A·f + B
	p = sigmoid_apply(f, AB[0], AB[1])
	dz = -p * (1.0 - p)
	return np.column_stack([dz * f, dz])

def _residuals(AB: np.ndarray, f: np.ndarray, t: np.ndarray) -> np.ndarray:
	return sigmoid_apply(f, AB[0], AB[1]) - t

def _residuals_jac(AB: np.ndarray, f: np.ndarray, t: np.ndarray) -> np.ndarray:
	return logistic_jacobian(f, AB)

def platt_targets(y: np.ndarray) -> np.ndarray:
	"""
	Smoothed targets: (N₊ + 1)/(N₊ + 2) for +1 labels, 1/(N₋ + 2) for the others.
	"""
	y = np.asarray(y, dtype=float).reshape(-1)
	n_p = int(np.sum(y == 1.0))
	n_n = int(np.sum(y == -1.0))
	t_p = (1.0 + n_p) / (2.0 + n_p)
	t_n = 1.0 / (2.0 + n_n)
	return np.where(y == 1.0, t_p, t_n)

@dataclass(frozen=True)
class CalibrationParameters:
	A: float
	B: float
	converged: bool = True
	n_iter: int = 0

	def apply(self, f: np.ndarray) -> np.ndarray:
		return sigmoid_apply(f, self.A, self.B)

	def __iter__(self):
		# unpacks as (A, B)
		yield self.A
		yield self.B

class PlattScaling:
	"""
	Platt scaling: maps raw decision values to probabilities.

	Fits p(f) = 1 / (1 + exp(A·f + B)) to the smoothed targets of
	`platt_targets` by nonlinear least squares, using scipy's
	Levenberg-Marquardt (`least_squares(method="lm")`) with the analytic
	Jacobian. With this sign convention a classifier whose decision value grows
	with the positive class gets A < 0.

	Parameters
	----------
	init_params : tuple[float, float]
		Starting (A, B).
	max_iter : int
		Cap on residual evaluations (`max_nfev`).
	tol : float
		`ftol`, `xtol` and `gtol` of the solver.

	Attributes
	----------
	params_ : CalibrationParameters
		Fitted (A, B) and convergence status.
	result_ : scipy.optimize.OptimizeResult
		Raw solver output.

	Notes
	-----
	A fit that stops on `max_iter` still sets `params_`, with
	`converged=False`, and issues an OptimizerNonConvergence warning.
	The "lm" method needs at least two decision values.
	"""

	def __init__(self,
				 init_params: tuple[float, float] = (1.0, 1.0),
				 max_iter: int = 100,
				 tol: float = 1e-10):
		if max_iter < 1:
			raise ValueError(f"max_iter must be >= 1, got {max_iter}")
		self.init_params = tuple(float(v) for v in init_params)
		self.max_iter = int(max_iter)
		self.tol = float(tol)

		self.params_: CalibrationParameters | None = None
		self.result_: OptimizeResult | None = None

	def fit(self, y: np.ndarray, f: np.ndarray) -> "PlattScaling":
		y = np.asarray(y, dtype=float).reshape(-1)
		f = np.asarray(f, dtype=float).reshape(-1)
		if y.shape[0] != f.shape[0]:
			raise LengthMismatch(f"{y.shape[0]} labels but {f.shape[0]} decision values")
		if y.shape[0] < 2:
			raise ValueError(f"Platt scaling needs at least two decision values, got {y.shape[0]}")

		t = platt_targets(y)
		res = least_squares(_residuals, x0=np.array(self.init_params), jac=_residuals_jac,
							args=(f, t), method="lm", max_nfev=self.max_iter,
							ftol=self.tol, xtol=self.tol, gtol=self.tol)
		self.result_ = res
		A, B = res.x
		self.params_ = CalibrationParameters(A=float(A), B=float(B),
											 converged=bool(res.success),
											 n_iter=int(res.nfev))
		log.debug(f"Platt scaling: A={A:.6f} B={B:.6f} status={res.status} nfev={res.nfev}")
		if not res.success:
			log.warning(f"Platt scaling did not converge: {res.message}")
			warnings.warn(f"Platt scaling did not converge: {res.message}", OptimizerNonConvergence, stacklevel=2)
		return self

	def predict_proba(self, f: np.ndarray) -> np.ndarray:
		if self.params_ is None:
			raise RuntimeError("The calibrator isn't fitted, call `fit` first")
		return self.params_.apply(f)

def platt_scaling(y: np.ndarray, f: np.ndarray, **options) -> CalibrationParameters:
	return PlattScaling(**options).fit(y, f).params_
