#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import os
import pandas as pd
import logging
import yaml
from platform import system
from typing import Any

log = logging.getLogger(__name__)

def getPath(script_dir, file_dir):
	plat = system()
	if plat == "Windows":
		script_dir = script_dir.replace("/", "\\")
		file_dir = file_dir.replace("/", "\\")
	else:
		script_dir = script_dir.replace("\\", "/")
		file_dir = file_dir.replace("\\", "/")
	return script_dir, file_dir

DEFAULT_PARAMS = "params.yaml"

def read_params(fname: str = DEFAULT_PARAMS) -> dict[str, Any]:
	"""
	Load the YAML config. A relative path is looked up in the working directory,
	then next to this script. A missing default file gives an empty config (the
	constructors carry the same defaults); any other missing file raises.
	"""
	script_dir = os.path.dirname(os.path.abspath(__file__))
	script_dir, file_dir = getPath(script_dir, fname)
	candidates = [file_dir] if os.path.isabs(file_dir) else [os.path.abspath(file_dir), os.path.join(script_dir, file_dir)]
	full_path = next((p for p in candidates if os.path.isfile(p)), None)
	if full_path is None:
		if fname == DEFAULT_PARAMS:
			log.warning(f"No {DEFAULT_PARAMS} found, using built-in defaults")
			return {}
		raise FileNotFoundError(f"params file not found: {fname} (looked in {candidates})")
	log.debug(f"Reading params: {full_path}")
	with open(full_path, "r") as fp:
		params = yaml.safe_load(fp)
	return params or {}

def apply_params(model, algo_name: str, typ: str, params: dict, is_sci: bool = False) -> dict[str, Any]:
	"""
	Applies the hyperparameters of params[algo_name][scikit|scratch][typ] to the model
	through model.set_params(**par), so scratch models validate them like their
	constructor does (unknown names or bad values raise ValueError).
	Returns the applied dict.
	"""
	par = (
		params.get(algo_name, {})
			  .get("scikit" if is_sci else "scratch", {})
			  .get(typ, {})
		or {}
	)
	if not par:
		return {}

	model.set_params(**par)
	log.debug(f"Hyperparameters applied to {algo_name} ({'scikit-learn' if is_sci else 'scratch'}) [{typ}]: {par}")
	return par

def to_pm_one(y: np.ndarray) -> np.ndarray:
	"""{0,1} or {-1,+1} labels -> {-1,+1}; only an exact 1 is positive."""
	y = np.asarray(y, dtype=float).reshape(-1)
	return np.where(y == 1.0, 1.0, -1.0)

def build_results_frame(columns: dict[str, Any]) -> pd.DataFrame:
	"""One column per entry; shorter columns (weights, bias) are padded with NaN."""
	series = {name: pd.Series(np.ravel(np.asarray(values, dtype=float))) for name, values in columns.items()}
	lengths = {len(s) for s in series.values()}
	if len(lengths) > 1:
		log.debug(f"Padding columns to {max(lengths)} rows")
	return pd.DataFrame(series)

def write_parquet(df: pd.DataFrame, path: str) -> str:
	parent = os.path.dirname(os.path.abspath(path))
	os.makedirs(parent, exist_ok=True)
	df.to_parquet(path, engine="pyarrow", compression=None, index=False)
	log.info(f"Wrote {len(df)} rows to {path}")
	return path