import math

import numpy as np
import pandas as pd
import pytest
from sklearn.svm import LinearSVC

import utils
from svm_platt.SVM import SVM


def test_read_params_default_file() -> None:
	params = utils.read_params()
	assert params["SVM"]["scratch"]["c"]["n_iters"] == 1000
	assert params["platt"]["max_iter"] == 100
	assert params["data"]["positive"]["y"]["std"] == 1.5


def test_read_params_absolute_path(tmp_path) -> None:
	path = tmp_path / "p.yaml"
	path.write_text("platt:\n  max_iter: 7\n")
	assert utils.read_params(str(path)) == {"platt": {"max_iter": 7}}


def test_read_params_empty_file(tmp_path) -> None:
	path = tmp_path / "empty.yaml"
	path.write_text("")
	assert utils.read_params(str(path)) == {}


def test_read_params_prefers_working_directory(tmp_path, monkeypatch) -> None:
	(tmp_path / "params.yaml").write_text("platt:\n  max_iter: 9\n")
	monkeypatch.chdir(tmp_path)
	assert utils.read_params() == {"platt": {"max_iter": 9}}


def test_read_params_falls_back_to_script_directory(tmp_path, monkeypatch) -> None:
	monkeypatch.chdir(tmp_path)
	assert utils.read_params()["platt"]["max_iter"] == 100


def test_read_params_missing_default_gives_empty_config(tmp_path, monkeypatch) -> None:
	monkeypatch.chdir(tmp_path)
	monkeypatch.setattr(utils, "__file__", str(tmp_path / "elsewhere" / "utils.py"))
	assert utils.read_params() == {}


def test_read_params_missing_explicit_file(tmp_path, monkeypatch) -> None:
	monkeypatch.chdir(tmp_path)
	with pytest.raises(FileNotFoundError):
		utils.read_params("other.yaml")


def test_apply_params_scratch() -> None:
	svm = SVM()
	params = {"SVM": {"scratch": {"c": {"learning_rate": 0.5, "n_iters": 3}}}}
	applied = utils.apply_params(svm, "SVM", "c", params)
	assert applied == {"learning_rate": 0.5, "n_iters": 3}
	assert (svm.lr, svm.n_iters) == (0.5, 3)


def test_apply_params_scikit() -> None:
	model = LinearSVC()
	utils.apply_params(model, "SVM", "c", {"SVM": {"scikit": {"c": {"C": 3.0}}}}, is_sci=True)
	assert model.C == 3.0


def test_apply_params_missing_section() -> None:
	svm = SVM()
	assert utils.apply_params(svm, "SVM", "c", {}) == {}
	assert svm.n_iters == 1000


def test_apply_params_unknown_attribute() -> None:
	with pytest.raises(ValueError, match="gamma"):
		utils.apply_params(SVM(), "SVM", "c", {"SVM": {"scratch": {"c": {"gamma": 1.0}}}})


def test_apply_params_validates_scratch_values() -> None:
	svm = SVM()
	with pytest.raises(ValueError, match="learning_rate"):
		utils.apply_params(svm, "SVM", "c", {"SVM": {"scratch": {"c": {"learning_rate": -1, "n_iters": 3}}}})
	assert (svm.lr, svm.n_iters) == (1e-4, 1000)


def test_to_pm_one() -> None:
	np.testing.assert_array_equal(utils.to_pm_one([1, 0, -1, 2, 1.0]), [1, -1, -1, -1, 1])


def test_build_results_frame_pads_short_columns() -> None:
	df = utils.build_results_frame({"f_hat": [0.1, -0.2, 0.3], "w": np.array([1.0, 2.0]), "b": [0.5]})
	assert list(df.columns) == ["f_hat", "w", "b"]
	assert len(df) == 3
	assert df["w"].tolist()[:2] == [1.0, 2.0]
	assert math.isnan(df["w"].iloc[2])
	assert df["b"].iloc[0] == 0.5
	assert df["b"].isna().sum() == 2


def test_write_parquet_round_trip(tmp_path) -> None:
	df = utils.build_results_frame({"x": [1.0, 2.0], "b": [0.25]})
	path = utils.write_parquet(df, str(tmp_path / "out" / "svm.parquet"))
	back = pd.read_parquet(path)
	pd.testing.assert_frame_equal(back, df)
