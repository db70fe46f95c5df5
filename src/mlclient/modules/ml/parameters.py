"""Algorithm names and per-algorithm parameter schemas."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mlclient.core.exceptions import InvalidArgumentError


class FunctionName(StrEnum):
    """Algorithms known to the ML node."""

    KMEANS = "KMEANS"
    LINEAR_REGRESSION = "LINEAR_REGRESSION"
    BATCH_RCF = "BATCH_RCF"
    FIT_RCF = "FIT_RCF"
    LOGISTIC_REGRESSION = "LOGISTIC_REGRESSION"
    SAMPLE_ALGO = "SAMPLE_ALGO"
    LOCAL_SAMPLE_CALCULATOR = "LOCAL_SAMPLE_CALCULATOR"
    ANOMALY_LOCALIZATION = "ANOMALY_LOCALIZATION"
    TEXT_EMBEDDING = "TEXT_EMBEDDING"
    SPARSE_ENCODING = "SPARSE_ENCODING"
    REMOTE = "REMOTE"

    @classmethod
    def from_name(cls, name: str) -> FunctionName:
        """Look up an algorithm by case-insensitive name."""
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unsupported algorithm: {name}") from None


class MLAlgoParams(BaseModel):
    """Base class for algorithm parameters."""

    model_config = ConfigDict(extra="forbid")


class DistanceType(StrEnum):
    """Distance metrics for k-means."""

    EUCLIDEAN = "EUCLIDEAN"
    COSINE = "COSINE"
    L1 = "L1"


class KMeansParams(MLAlgoParams):
    """Parameters for k-means clustering."""

    centroids: int | None = Field(default=None, ge=1, description="Number of clusters")
    iterations: int | None = Field(default=None, ge=1, description="Maximum number of iterations")
    distance_type: DistanceType | None = Field(default=None, description="Distance metric")


class LinearRegressionParams(MLAlgoParams):
    """Parameters for linear regression."""

    objective_type: str | None = Field(default=None, description="Loss function, e.g. SQUARED_LOSS")
    optimizer_type: str | None = Field(default=None, description="Optimizer, e.g. SIMPLE_SGD or ADAM")
    learning_rate: float | None = Field(default=None, gt=0)
    momentum_type: str | None = None
    momentum_factor: float | None = None
    epsilon: float | None = None
    beta1: float | None = None
    beta2: float | None = None
    decay_rate: float | None = None
    epochs: int | None = Field(default=None, ge=1)
    batch_size: int | None = Field(default=None, ge=1)
    logging_interval: int | None = None
    seed: int | None = None
    target: str | None = Field(default=None, description="Name of the target column")


class LogisticRegressionParams(MLAlgoParams):
    """Parameters for logistic regression."""

    objective: str | None = Field(default=None, description="Loss function, e.g. LOGMULTICLASS")
    optimizer_type: str | None = None
    learning_rate: float | None = Field(default=None, gt=0)
    momentum_type: str | None = None
    momentum_factor: float | None = None
    epsilon: float | None = None
    beta1: float | None = None
    beta2: float | None = None
    decay_rate: float | None = None
    epochs: int | None = Field(default=None, ge=1)
    batch_size: int | None = Field(default=None, ge=1)
    logging_interval: int | None = None
    seed: int | None = None
    target: str | None = None


class BatchRCFParams(MLAlgoParams):
    """Parameters for batch random cut forest anomaly detection."""

    number_of_trees: int | None = Field(default=None, ge=1)
    shingle_size: int | None = Field(default=None, ge=1)
    sample_size: int | None = Field(default=None, ge=1)
    output_after: int | None = None
    training_data_size: int | None = None
    anomaly_score_threshold: float | None = None


class FitRCFParams(MLAlgoParams):
    """Parameters for fixed-in-time random cut forest anomaly detection."""

    number_of_trees: int | None = Field(default=None, ge=1)
    shingle_size: int | None = Field(default=None, ge=1)
    sample_size: int | None = Field(default=None, ge=1)
    output_after: int | None = None
    time_decay: float | None = None
    anomaly_rate: float | None = None
    time_field: str | None = None
    date_format: str | None = None
    time_zone: str | None = None


class SampleAlgoParams(MLAlgoParams):
    """Parameters for the sample algorithm."""

    sample_param: int | None = None


ALGO_PARAMS: dict[FunctionName, type[MLAlgoParams]] = {
    FunctionName.KMEANS: KMeansParams,
    FunctionName.LINEAR_REGRESSION: LinearRegressionParams,
    FunctionName.LOGISTIC_REGRESSION: LogisticRegressionParams,
    FunctionName.BATCH_RCF: BatchRCFParams,
    FunctionName.FIT_RCF: FitRCFParams,
    FunctionName.SAMPLE_ALGO: SampleAlgoParams,
}


def params_class_for(function_name: FunctionName) -> type[MLAlgoParams] | None:
    """Return the parameter schema of an algorithm, or None if it takes none."""
    return ALGO_PARAMS.get(function_name)


def parse_params(function_name: FunctionName, data: MLAlgoParams | dict[str, Any] | None) -> MLAlgoParams | None:
    """Validate raw parameters against the algorithm's schema."""
    if data is None or isinstance(data, MLAlgoParams):
        return data
    params_cls = params_class_for(function_name)
    if params_cls is None:
        if data:
            raise InvalidArgumentError(f"Algorithm {function_name} does not accept parameters")
        return None
    return params_cls.model_validate(data)
