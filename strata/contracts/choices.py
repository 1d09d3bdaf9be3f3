"""Literal-based choice sets shared by the config contracts."""

from __future__ import annotations

from typing import Literal

BuiltinDataset = Literal["iris", "wine", "breast_cancer"]

MetricName = Literal["accuracy", "balanced_accuracy", "kappa", "f1_macro"]

ScaleName = Literal["none", "standard", "robust", "minmax"]

LDASolver = Literal["svd", "lsqr", "eigen"]

TreeCriterion = Literal["gini", "entropy", "log_loss"]

MaxFeaturesName = Literal["sqrt", "log2"]

KNNWeights = Literal["uniform", "distance"]

KNNAlgorithm = Literal["auto", "ball_tree", "kd_tree", "brute"]

SVMKernel = Literal["linear", "poly", "rbf", "sigmoid"]

ClassWeight = Literal["balanced"]
