#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np

from svm_platt.errors import DimensionMismatch, LengthMismatch

log = logging.getLogger(__name__)

class SVM:
	"""
	Linear Support Vector Machine (binary classification) implemented with NumPy.

	This model is trained by sub-gradient descent on the hinge loss with L2
	regularization. It finds the hyperplane f(x) = w·x + b separating the two
	classes while pulling the weights towards zero.

	Objective
	---------
	Minimize the following loss:
		L(w, b) = λ/2 ‖w‖² + Σ_i max(0, 1 - y_i (w·x_i + b))
	where y_i ∈ {-1, +1}.

	Parameters
	----------
	learning_rate : float
		Step size for the sub-gradient updates (must be > 0).
	lambda_ : float
		L2 regularization strength λ (must be >= 0).
	n_iters : int
		Number of full passes over the training rows (epochs).
	mode : str
		"sgd" (default): one update per row, applied immediately, rows visited
		in order, so later rows of a pass see the weights moved by earlier ones.
		"batch": one averaged update per pass over all rows.

	Notes
	-----
	Per-row sub-gradient ("sgd" mode):
		Let m_i = y_i (w·x_i + b).
		If m_i >= 1 (constraint satisfied):
		    dL/dw = λ·w,            dL/db = 0
		Otherwise (hinge active):
		    dL/dw = λ·w - y_i·x_i,  dL/db = -y_i
		then w <- w - lr·dL/dw and b <- b - lr·dL/db.

	"batch" mode averages the hinge pulls of the active rows:
		dL/dw = λ·w - (1/n) Σ_active y_i·x_i,  dL/db = -(1/n) Σ_active y_i

	Labels are collapsed to two classes: a label equal to +1 maps to +1, every
	other value maps to -1.

	Attributes
	----------
	w : np.ndarray
		Weight vector (a length-1 placeholder until `fit` or `baseline`).
	b : float
		Bias (intercept).
	cls_map : np.ndarray
		±1 labels derived from the last `fit`.
	typ : str
		'c' indicating a classification task.
	"""


	typ = 'c'
	modes = ("sgd", "batch")

	def __init__(self,
				 learning_rate: float = 1e-4,
				 lambda_: float = 1e-2,
				 n_iters: int = 1000,
				 mode: str = "sgd"):
		self._check_params(learning_rate, lambda_, n_iters, mode)
		self.lr = float(learning_rate)
		self.lambda_ = float(lambda_)
		self.n_iters = int(n_iters)
		self.mode = mode

		self.w: np.ndarray = np.zeros(1)
		self.b: float = 0.0
		self.cls_map: np.ndarray = np.zeros(1)

	@classmethod
	def _check_params(cls, learning_rate, lambda_, n_iters, mode) -> None:
		if learning_rate <= 0:
			raise ValueError(f"learning_rate must be > 0, got {learning_rate}")
		if lambda_ < 0:
			raise ValueError(f"lambda_ must be >= 0, got {lambda_}")
		if n_iters < 0:
			raise ValueError(f"n_iters must be >= 0, got {n_iters}")
		if mode not in cls.modes:
			raise ValueError(f"mode must be one of {cls.modes}, got {mode!r}")

	def get_params(self) -> dict:
		return {"learning_rate": self.lr, "lambda_": self.lambda_, "n_iters": self.n_iters, "mode": self.mode}

	def set_params(self, **params) -> "SVM":
		"""Same names and checks as the constructor; nothing changes if a value is rejected."""
		current = self.get_params()
		unknown = set(params) - set(current)
		if unknown:
			raise ValueError(f"Invalid parameter(s) {sorted(unknown)} for SVM, valid: {sorted(current)}")
		current.update(params)
		self._check_params(**current)
		self.lr = float(current["learning_rate"])
		self.lambda_ = float(current["lambda_"])
		self.n_iters = int(current["n_iters"])
		self.mode = current["mode"]
		return self

	def init_weight(self, X: np.ndarray) -> None:
		self.w = np.zeros(X.shape[1], dtype=float)

	def get_cls_map(self, y: np.ndarray) -> None:
		self.cls_map = np.where(y == 1.0, 1.0, -1.0)

	def satisfy_constraint(self, x: np.ndarray, idx: int) -> bool:
		linear_model = np.dot(self.w, x) + self.b
		return linear_model * self.cls_map[idx] >= 1.0

	def get_gradients(self, constrain: bool, x: np.ndarray, idx: int) -> tuple[np.ndarray, float]:
		if constrain:
			return self.lambda_ * self.w, 0.0
		y = self.cls_map[idx]
		return self.lambda_ * self.w - y * x, -y

	def update_weight_bias(self, dw: np.ndarray, db: float) -> None:
		self.w = self.w - self.lr * dw
		self.b = self.b - self.lr * db

	def fit(self, X: np.ndarray, y: np.ndarray) -> "SVM":
		X = self._check_features(X)
		y = np.asarray(y, dtype=float).reshape(-1)
		if X.shape[0] != y.shape[0]:
			raise LengthMismatch(f"{X.shape[0]} rows but {y.shape[0]} labels")

		self.init_weight(X)
		self.b = 0.0
		self.get_cls_map(y)
		log.debug(f"Training SVM ({self.mode}): lr={self.lr} lambda={self.lambda_} "
				  f"n_iters={self.n_iters} on {X.shape[0]}x{X.shape[1]}")

		if self.mode == "batch":
			self._fit_batch(X)
		else:
			for _ in range(self.n_iters):
				for i, x in enumerate(X):
					constrain = self.satisfy_constraint(x, i)
					dw, db = self.get_gradients(constrain, x, i)
					self.update_weight_bias(dw, db)

		log.debug(f"Trained SVM: w={self.w} b={self.b}")
		return self

	def _fit_batch(self, X: np.ndarray) -> None:
		n = X.shape[0]
		y = self.cls_map
		for _ in range(self.n_iters):
			m = y * (X @ self.w + self.b)
			active = m < 1.0				  # hinge active
			if np.any(active):
				ya = y[active]
				Xa = X[active]
				dw = self.lambda_ * self.w - (Xa.T @ ya) / n
				db = -float(np.sum(ya)) / n
			else:
				dw = self.lambda_ * self.w
				db = 0.0
			self.update_weight_bias(dw, db)

	def compute_decision_values(self, X: np.ndarray) -> np.ndarray:
		X = self._check_features(X)
		if X.shape[1] != self.w.shape[0]:
			raise DimensionMismatch(f"features have {X.shape[1]} columns, weight has {self.w.shape[0]}")
		return X @ self.w + self.b

	decision_function = compute_decision_values

	def predict(self, X: np.ndarray) -> np.ndarray:
		s = self.compute_decision_values(X)
		return np.where(s > 0.0, 1.0, -1.0)

	def baseline(self, X: np.ndarray) -> np.ndarray:
		"""Predict with an all-zero weight (bias untouched): a reference score before training."""
		X = self._check_features(X)
		self.init_weight(X)
		return self.predict(X)

	@staticmethod
	def _check_features(X: np.ndarray) -> np.ndarray:
		X = np.asarray(X, dtype=float)
		if X.ndim != 2:
			raise DimensionMismatch(f"features must be a 2-D array, got {X.ndim}-D")
		return X
