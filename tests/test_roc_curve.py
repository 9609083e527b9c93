import numpy as np
import pytest

from svm_platt.ConfusionMatrix import ConfusionMatrix
from svm_platt.PlattScaling import platt_scaling
from svm_platt.RocCurve import RocCurve, RocPoint
from svm_platt.SVM import SVM
from svm_platt.errors import LengthMismatch


def _calibrated(blobs):
	X, y = blobs
	f = SVM(learning_rate=1e-3, lambda_=1e-2, n_iters=20).fit(X, y).compute_decision_values(X)
	params = platt_scaling(y, f)
	return y, f, params


def test_default_threshold_count(blobs) -> None:
	y, f, params = _calibrated(blobs)
	roc = RocCurve(y, params.apply(f))
	assert len(roc) == len(y)
	assert len(list(roc)) == len(y)


def test_is_restartable() -> None:
	y = np.array([1.0, -1.0, 1.0, -1.0])
	roc = RocCurve(y, np.array([0.9, 0.4, 0.6, 0.1]))
	assert list(roc) == list(roc)
	assert all(isinstance(p, RocPoint) for p in roc)


def test_extremes_and_monotonicity(blobs) -> None:
	y, f, params = _calibrated(blobs)
	points = list(RocCurve(y, params.apply(f)))
	assert (points[0].threshold, points[0].fpr, points[0].tpr) == (0.0, 1.0, 1.0)
	assert (points[-1].threshold, points[-1].fpr, points[-1].tpr) == (1.0, 0.0, 0.0)
	fpr = np.array([p.fpr for p in points])
	tpr = np.array([p.tpr for p in points])
	assert np.all(np.diff(fpr) <= 0) and np.all(np.diff(tpr) <= 0)
	assert np.all((fpr >= 0) & (fpr <= 1)) and np.all((tpr >= 0) & (tpr <= 1))


def test_point_matches_decision_value_threshold(blobs) -> None:
	y, f, params = _calibrated(blobs)
	roc = list(RocCurve(y, params.apply(f), n_thresholds=3))
	# p > 0.5  <=>  A·f + B < 0  <=>  f > -B/A  (A < 0)
	cm = ConfusionMatrix.from_labels(y, np.where(f > -params.B / params.A, 1.0, -1.0))
	assert roc[1].threshold == 0.5
	assert roc[1].fpr == pytest.approx(cm.fpr())
	assert roc[1].tpr == pytest.approx(cm.tpr())
	# threshold 0 keeps every sample positive
	cm0 = ConfusionMatrix.from_labels(y, np.ones_like(y))
	assert (roc[0].fpr, roc[0].tpr) == (cm0.fpr(), cm0.tpr())


def test_auc_of_perfect_ranking() -> None:
	y = np.array([1.0, 1.0, 1.0, -1.0, -1.0, -1.0])
	proba = np.array([0.9, 0.8, 0.7, 0.2, 0.1, 0.3])
	assert RocCurve(y, proba, n_thresholds=11).auc() == pytest.approx(1.0)


def test_auc_of_blobs(blobs) -> None:
	y, f, params = _calibrated(blobs)
	assert 0.9 < RocCurve(y, params.apply(f)).auc() <= 1.0


def test_length_mismatch() -> None:
	with pytest.raises(LengthMismatch):
		RocCurve(np.ones(3), np.ones(2))
