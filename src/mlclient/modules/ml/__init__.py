"""ML module - algorithm inputs, parameters, outputs and the train/predict actions."""

from .actions import (
    ML_PREDICTION_TASK_ACTION,
    ML_TRAIN_AND_PREDICT_TASK_ACTION,
    ML_TRAINING_TASK_ACTION,
    MLPredictionTaskRequest,
    MLTaskResponse,
    MLTrainingTaskRequest,
)
from .arguments import RunAction, RunArguments, convert_argument_to_ml_parameter, get_action, get_function_name
from .parameters import (
    BatchRCFParams,
    DistanceType,
    FitRCFParams,
    FunctionName,
    KMeansParams,
    LinearRegressionParams,
    LogisticRegressionParams,
    MLAlgoParams,
    SampleAlgoParams,
)
from .schemas import (
    DataFrameInputDataset,
    MLInput,
    MLInputDataset,
    MLInputDataType,
    MLOutput,
    MLOutputType,
    MLPredictionOutput,
    MLTrainingOutput,
    ModelTensorOutput,
    PandasDataFrame,
    SearchQueryInputDataset,
    TextDocsInputDataset,
)

__all__ = [
    "BatchRCFParams",
    "DataFrameInputDataset",
    "DistanceType",
    "FitRCFParams",
    "FunctionName",
    "KMeansParams",
    "LinearRegressionParams",
    "LogisticRegressionParams",
    "MLAlgoParams",
    "MLInput",
    "MLInputDataType",
    "MLInputDataset",
    "MLOutput",
    "MLOutputType",
    "MLPredictionOutput",
    "MLPredictionTaskRequest",
    "MLTaskResponse",
    "MLTrainingOutput",
    "MLTrainingTaskRequest",
    "ML_PREDICTION_TASK_ACTION",
    "ML_TRAINING_TASK_ACTION",
    "ML_TRAIN_AND_PREDICT_TASK_ACTION",
    "ModelTensorOutput",
    "PandasDataFrame",
    "RunAction",
    "RunArguments",
    "SampleAlgoParams",
    "SearchQueryInputDataset",
    "TextDocsInputDataset",
    "convert_argument_to_ml_parameter",
    "get_action",
    "get_function_name",
]
