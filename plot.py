#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict, Any

def format_classification_report(models_results: List[Dict], labels: List[str]) -> str:
	"""
	Shows Acc/Prec/Rec/F1 at decision value 0, the Platt parameters, ROC AUC,
	+ time of training and prediction (scores).
	"""
	lines = ["", "=== Classification report ==="]
	for lab, res in zip(labels, models_results):
		base = res["base_metrics"]   # {'acc','prec','rec','f1',...}
		cal = res["calibration"]     # CalibrationParameters
		times = res["times"]         # {'fit', 'predict(scores)', ...}
		_, _, auc_val = res["roc"]
		lines.append(
			f"{lab:>20} | "
			f"Acc={base['acc']:.3f} Prec={base['prec']:.3f} Rec={base['rec']:.3f} F1={base['f1']:.3f} | "
			f"A={cal.A:.3f} B={cal.B:.3f}{'' if cal.converged else ' (not converged)'} | AUC={auc_val:.3f} | "
			f"fit={times['fit']*1000:.1f} ms | pred={times['predict(scores)']*1000:.1f} ms")
	return "\n".join(lines)

def print_classification_report(models_results: List[Dict], labels: List[str]) -> None:
	print(format_classification_report(models_results, labels))

def plot_roc(models_results: List[Dict[str, Any]], labels: List[str], title: str = "ROC - comparison") -> None:
	plt.figure()
	for res, lab in zip(models_results, labels):
		fpr, tpr, auc_val = res["roc"]
		plt.plot(fpr, tpr, linewidth=2, label=f"{lab} (AUC={auc_val:.3f})")
	plt.plot([0, 1], [0, 1], linestyle="--", linewidth=1)
	plt.xlabel("FPR")
	plt.ylabel("TPR")
	plt.title(title)
	plt.legend()
	plt.show()

def plot_calibration(models_results: List[Dict[str, Any]], labels: List[str], title: str = "Platt scaling") -> None:
	"""
	Calibrated probability against decision value, with the sigmoid drawn on top.
	"""
	plt.figure()
	for res, lab in zip(models_results, labels):
		f = res["scores"]
		cal = res["calibration"]
		grid = np.linspace(np.min(f), np.max(f), 200)
		plt.scatter(f, res["proba"], s=4, alpha=0.3)
		plt.plot(grid, cal.apply(grid), linewidth=2, label=f"{lab} (A={cal.A:.2f}, B={cal.B:.2f})")
	plt.xlabel("Decision value f(x)")
	plt.ylabel("P(y=+1 | f)")
	plt.title(title)
	plt.legend()
	plt.tight_layout()
	plt.show()
