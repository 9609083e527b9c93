#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #

class DimensionMismatch(ValueError):
	"""Feature columns and weight vector have different lengths."""


class LengthMismatch(ValueError):
	"""Two paired sequences (labels/predictions, rows/labels) have different lengths."""


class OptimizerNonConvergence(RuntimeWarning):
	"""The least-squares fit stopped on its evaluation cap before meeting its tolerances."""
