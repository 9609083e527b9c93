#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import argparse
import logging
import numpy as np
import pandas as pd
from sklearn.svm import LinearSVC as SkSVC

import utils
import bench
import plot
from data_prepared import make_gaussian_blobs, class_spec_from_params
from svm_platt.SVM import SVM
from svm_platt.ConfusionMatrix import ConfusionMatrix

log = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Linear SVM with Platt scaling on two Gaussian classes", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
	parser.add_argument("-p", "--params", help="YAML hyperparameter file", default="params.yaml")
	parser.add_argument("-n", "--n-samples", help="samples per class (overrides params)", type=int, default=None)
	parser.add_argument("-s", "--seed", help="random seed (overrides params)", type=int, default=None)
	parser.add_argument("-o", "--output", help="parquet output file (overrides params)", default=None)
	parser.add_argument("-i", "--n-iters", help="training passes (overrides params)", type=int, default=None)
	parser.add_argument("--mode", help="sub-gradient update mode", choices=list(SVM.modes), default=None)
	parser.add_argument("--compare-scikit", help="also train scikit-learn's LinearSVC", action="store_true")
	parser.add_argument("--plot", help="show ROC and calibration plots", action="store_true")
	parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")
	return parser

def _platt_options(params: dict) -> dict:
	opts = dict(params.get("platt", {}) or {})
	if "init_params" in opts:
		opts["init_params"] = tuple(opts["init_params"])
	return opts

def _make_data(args, params: dict) -> tuple[np.ndarray, np.ndarray]:
	data = params.get("data", {}) or {}
	n = args.n_samples if args.n_samples is not None else int(data.get("n_samples", 1000))
	seed = args.seed if args.seed is not None else data.get("seed")
	positive = class_spec_from_params(data["positive"]) if "positive" in data else None
	negative = class_spec_from_params(data["negative"]) if "negative" in data else None
	X, y = make_gaussian_blobs(n, seed=seed, positive=positive, negative=negative)
	return X, utils.to_pm_one(y)

def run(args) -> dict:
	params = utils.read_params(args.params)
	X, y = _make_data(args, params)

	svm = SVM()
	utils.apply_params(svm, "SVM", "c", params)
	overrides = {k: v for k, v in (("n_iters", args.n_iters), ("mode", args.mode)) if v is not None}
	if overrides:
		svm.set_params(**overrides)

	# Base line score
	base_pred = svm.baseline(X)
	base_cm = ConfusionMatrix.from_labels(y, base_pred)
	base_cm.summary()

	# Train, score, calibrate
	platt_options = _platt_options(params)
	res = bench.benchmark_classification(svm, X, y, platt_options)
	y_hat = svm.predict(X)
	res["confusion"].summary()

	cal = res["calibration"]
	fpr, tpr, roc_auc = res["roc"]
	print(f"Platt: A={cal.A:.6f} B={cal.B:.6f} (converged={cal.converged}, iterations={cal.n_iter})")
	print(f"ROC AUC: {roc_auc:.4f}")

	results = [res]
	labels = ["SVM"]
	if args.compare_scikit:
		model_sci = SkSVC()
		utils.apply_params(model_sci, "SVM", "c", params, is_sci=True)
		results.append(bench.benchmark_classification(model_sci, X, y, platt_options))
		labels.append("SVM_scikit")
	plot.print_classification_report(results, labels)

	df = utils.build_results_frame({
		"x": X[:, 0],
		"y": X[:, 1],
		"g": y,
		"g_hat": y_hat,
		"w": svm.w,
		"b": [svm.b],
		"f_hat": res["scores"],
		"z": res["proba"],
		"tpr": tpr,
		"fpr": fpr,
	})
	with pd.option_context("display.max_columns", None, "display.width", 120):
		print(df.head(10))

	output = args.output or (params.get("output", {}) or {}).get("path", "svm.parquet")
	utils.write_parquet(df, output)

	if args.plot:
		plot.plot_roc(results, labels)
		plot.plot_calibration(results, labels)

	return {"model": svm, "baseline": base_cm, "results": results, "frame": df, "output": output}

def main(argv: list[str] | None = None) -> None:
	args = build_parser().parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
	run(args)

if __name__ == "__main__":
	main()
