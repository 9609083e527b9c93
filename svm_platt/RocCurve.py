#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from typing import Iterator, NamedTuple
import numpy as np

from svm_platt.ConfusionMatrix import ConfusionMatrix
from svm_platt.errors import LengthMismatch

class RocPoint(NamedTuple):
	threshold: float
	fpr: float
	tpr: float

class RocCurve:
	"""
	ROC sweep over probability thresholds in [0, 1].

	A sample is predicted +1 when its probability is strictly above the
	threshold. Points are computed on iteration, so the curve can be walked
	any number of times.
	"""

	def __init__(self, y: np.ndarray, proba: np.ndarray, n_thresholds: int | None = None):
		self.y = np.asarray(y, dtype=float).reshape(-1)
		self.proba = np.asarray(proba, dtype=float).reshape(-1)
		if self.y.shape[0] != self.proba.shape[0]:
			raise LengthMismatch(f"{self.y.shape[0]} labels but {self.proba.shape[0]} probabilities")
		self.n_thresholds = self.y.shape[0] if n_thresholds is None else int(n_thresholds)
		self.thresholds = np.linspace(0.0, 1.0, self.n_thresholds)

	def __len__(self) -> int:
		return self.n_thresholds

	def __iter__(self) -> Iterator[RocPoint]:
		for t in self.thresholds:
			pred = np.where(self.proba > t, 1.0, -1.0)
			cm = ConfusionMatrix.from_labels(self.y, pred)
			yield RocPoint(float(t), cm.fpr(), cm.tpr())

	def fpr(self) -> np.ndarray:
		return np.array([p.fpr for p in self])

	def tpr(self) -> np.ndarray:
		return np.array([p.tpr for p in self])

	def auc(self) -> float:
		fpr, tpr = self.fpr(), self.tpr()
		order = np.lexsort((tpr, fpr))
		return float(np.trapezoid(tpr[order], fpr[order]))
