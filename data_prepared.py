#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import logging
import numpy as np

log = logging.getLogger(__name__)

# (mean, std) of each feature column per class
POSITIVE = {"x": (1.0, 1.0), "y": (2.0, 1.5)}
NEGATIVE = {"x": (-1.0, 1.0), "y": (-2.0, 1.5)}

def _blob(rng: np.random.Generator, n: int, spec: dict) -> np.ndarray:
	cols = [rng.normal(loc=mean, scale=std, size=n) for mean, std in spec.values()]
	return np.column_stack(cols)

def make_gaussian_blobs(n: int,
						rng: np.random.Generator | None = None,
						seed: int | None = None,
						positive: dict | None = None,
						negative: dict | None = None) -> tuple[np.ndarray, np.ndarray]:
	"""
	Two Gaussian classes of n samples each.

	Rows 0..n-1 are the +1 class, rows n..2n-1 the -1 class.
	`positive`/`negative` map a feature name to its (mean, std).
	"""
	if n <= 0:
		raise ValueError(f"n must be > 0, got {n}")
	positive = POSITIVE if positive is None else positive
	negative = NEGATIVE if negative is None else negative
	if len(positive) != len(negative):
		raise ValueError("both classes need the same features")
	if rng is None:
		rng = np.random.default_rng(seed)

	X1 = _blob(rng, n, positive)
	X2 = _blob(rng, n, negative)
	X = np.vstack([X1, X2])
	y = np.concatenate([np.ones(n), -np.ones(n)])
	log.debug(f"Generated {X.shape[0]} samples with {X.shape[1]} features")
	return X, y

def class_spec_from_params(section: dict) -> dict:
	"""{'x': {'mean': 1, 'std': 1}, ...} -> {'x': (1.0, 1.0), ...}"""
	return {name: (float(v["mean"]), float(v["std"])) for name, v in section.items()}
