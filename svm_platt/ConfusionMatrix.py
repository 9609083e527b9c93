#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from dataclasses import dataclass
import numpy as np

from svm_platt.errors import LengthMismatch

def _ratio(num: int, den: int) -> float:
	# undefined metrics come out as nan, never raise
	return num / den if den > 0 else float("nan")

@dataclass(frozen=True)
class ConfusionMatrix:
	"""
	2x2 tally of true vs predicted ±1 labels.

	Pairs whose true or predicted label is neither +1 nor -1 fall in no bucket
	and are left out of every count. Metrics whose denominator is zero are nan.
	"""

	tp: int
	tn: int
	fp: int
	fn: int

	@classmethod
	def from_labels(cls, y: np.ndarray, y_hat: np.ndarray) -> "ConfusionMatrix":
		y = np.asarray(y, dtype=float).reshape(-1)
		y_hat = np.asarray(y_hat, dtype=float).reshape(-1)
		if y.shape[0] != y_hat.shape[0]:
			raise LengthMismatch(f"{y.shape[0]} labels but {y_hat.shape[0]} predictions")

		pos, neg = (y == 1.0), (y == -1.0)
		pos_hat, neg_hat = (y_hat == 1.0), (y_hat == -1.0)
		return cls(
			tp=int((pos & pos_hat).sum()),
			tn=int((neg & neg_hat).sum()),
			fp=int((neg & pos_hat).sum()),
			fn=int((pos & neg_hat).sum()),
		)

	def total(self) -> int:
		return self.tp + self.tn + self.fp + self.fn

	def acc(self) -> float:
		return _ratio(self.tp + self.tn, self.total())

	def ppv(self) -> float:
		return _ratio(self.tp, self.tp + self.fp)

	def tpr(self) -> float:
		return _ratio(self.tp, self.tp + self.fn)

	def tnr(self) -> float:
		return _ratio(self.tn, self.tn + self.fp)

	def npv(self) -> float:
		return _ratio(self.tn, self.tn + self.fn)

	def fnr(self) -> float:
		return _ratio(self.fn, self.fn + self.tp)

	def fpr(self) -> float:
		return _ratio(self.fp, self.fp + self.tn)

	def f1_score(self) -> float:
		p = self.ppv()
		r = self.tpr()
		if p + r == 0:
			return float("nan")
		return 2 * p * r / (p + r)

	accuracy = acc
	precision = ppv
	recall = tpr
	specificity = tnr
	f1 = f1_score

	def to_matrix(self) -> np.ndarray:
		return np.array([[self.tp, self.fp],
						 [self.fn, self.tn]], dtype=float)

	def to_dict(self) -> dict[str, float | int]:
		return {
			"tp": self.tp, "tn": self.tn, "fp": self.fp, "fn": self.fn,
			"acc": self.acc(), "prec": self.ppv(), "rec": self.tpr(), "tnr": self.tnr(),
			"npv": self.npv(), "f1": self.f1_score(), "fpr": self.fpr(), "fnr": self.fnr(),
		}

	def summary(self) -> str:
		lines = [
			"=" * 30,
			f"Acc:\t{self.acc():.2f}",
			f"PPV:\t{self.ppv():.2f}",
			f"TPR:\t{self.tpr():.2f}",
			f"TNR:\t{self.tnr():.2f}",
			f"NPV:\t{self.npv():.2f}",
			f"F1:\t{self.f1_score():.2f}",
			f"FPR:\t{self.fpr():.2f}",
			f"FNR:\t{self.fnr():.2f}",
			"=" * 30,
		]
		report = "\n".join(lines)
		print(report)
		return report
