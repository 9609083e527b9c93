#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
from time import perf_counter
from contextlib import contextmanager
from typing import Dict, Any

from svm_platt.ConfusionMatrix import ConfusionMatrix
from svm_platt.PlattScaling import PlattScaling
from svm_platt.RocCurve import RocCurve


@contextmanager
def timer(name: str, store: Dict[str, float] | None = None):
	t0 = perf_counter()
	try:
		yield
	finally:
		dt = perf_counter() - t0
		if store is not None:
			store[name] = dt

def benchmark_classification(model, X: np.ndarray, y: np.ndarray,
							 platt_options: Dict[str, Any] | None = None,
							 n_thresholds: int | None = None) -> Dict[str, Any]:
	"""
	Trains a model (with .fit and .decision_function) on (X, y), measures times,
	scores it on the same rows, then calibrates the decision values with Platt
	scaling and sweeps the ROC curve over the calibrated probabilities.
	"""
	times: Dict[str, float] = {}
	with timer("fit", store=times):
		model.fit(X, y)

	with timer("predict(scores)", store=times):
		scores = np.asarray(model.decision_function(X), dtype=float)
	y_hat = np.where(scores > 0.0, 1.0, -1.0)
	cm = ConfusionMatrix.from_labels(y, y_hat)

	with timer("calibrate", store=times):
		platt = PlattScaling(**(platt_options or {})).fit(y, scores)
		proba = platt.predict_proba(scores)

	with timer("roc", store=times):
		roc = RocCurve(y, proba, n_thresholds=n_thresholds)
		fpr, tpr = roc.fpr(), roc.tpr()
		roc_auc = roc.auc()

	return {
		"model": model,
		"scores": scores,
		"y_hat": y_hat,
		"proba": proba,
		"times": times,
		"confusion": cm,
		"base_metrics": cm.to_dict(),
		"calibration": platt.params_,
		"roc": (fpr, tpr, roc_auc),
	}
