"""Pydantic schemas for ML inputs, datasets and outputs."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

import pandas as pd
from pydantic import BaseModel, Field, SerializeAsAny, model_validator

from mlclient.core.exceptions import InvalidArgumentError

from .parameters import FunctionName, MLAlgoParams, parse_params


class PandasDataFrame(BaseModel):
    """JSON-friendly table convertible to and from a pandas DataFrame."""

    columns: list[str] = Field(description="Column names")
    data: list[list[Any]] = Field(description="Rows, one list of values per row")

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> PandasDataFrame:
        """Create from a pandas DataFrame."""
        return cls(columns=[str(column) for column in df.columns], data=df.values.tolist())

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame."""
        return pd.DataFrame(self.data, columns=self.columns)

    def __len__(self) -> int:
        return len(self.data)


class MLInputDataType(StrEnum):
    """Kinds of input dataset."""

    DATA_FRAME = "DATA_FRAME"
    SEARCH_QUERY = "SEARCH_QUERY"
    TEXT_DOCS = "TEXT_DOCS"


class DataFrameInputDataset(BaseModel):
    """Inline tabular input."""

    input_type: Literal[MLInputDataType.DATA_FRAME] = MLInputDataType.DATA_FRAME
    data_frame: PandasDataFrame = Field(description="Input rows")


class SearchQueryInputDataset(BaseModel):
    """Input read by running a search query against indices."""

    input_type: Literal[MLInputDataType.SEARCH_QUERY] = MLInputDataType.SEARCH_QUERY
    indices: list[str] = Field(min_length=1, description="Indices to search")
    search_source: dict[str, Any] = Field(default_factory=dict, description="Search body (query, size, ...)")


class TextDocsInputDataset(BaseModel):
    """Raw text documents, e.g. for embedding models."""

    input_type: Literal[MLInputDataType.TEXT_DOCS] = MLInputDataType.TEXT_DOCS
    docs: list[str] = Field(description="Documents to process")
    result_filter: dict[str, Any] | None = Field(default=None, description="Optional model output filter")


MLInputDataset = Annotated[
    DataFrameInputDataset | SearchQueryInputDataset | TextDocsInputDataset,
    Field(discriminator="input_type"),
]


class MLInput(BaseModel):
    """Algorithm, parameters and dataset of a train or predict call."""

    algorithm: FunctionName = Field(description="Algorithm to run")
    parameters: SerializeAsAny[MLAlgoParams] | None = Field(default=None, description="Algorithm parameters")
    input_dataset: MLInputDataset | None = Field(default=None, description="Input data")

    @model_validator(mode="before")
    @classmethod
    def _coerce_parameters(cls, data: Any) -> Any:
        """Validate a raw parameter dict against the algorithm's parameter schema."""
        if not isinstance(data, dict):
            return data
        raw_params = data.get("parameters")
        algorithm = data.get("algorithm")
        if isinstance(raw_params, dict) and algorithm is not None:
            function_name = algorithm if isinstance(algorithm, FunctionName) else FunctionName.from_name(str(algorithm))
            data = {**data, "algorithm": function_name, "parameters": parse_params(function_name, raw_params)}
        return data

    @classmethod
    def parse(cls, algorithm: FunctionName | str, body: dict[str, Any] | None) -> MLInput:
        """Build an input from a REST request body.

        Recognized body keys:
            parameters: algorithm parameters
            input_data: inline data frame ({"columns": [...], "data": [[...]]})
            input_index + input_query: search query dataset
            text_docs: list of documents
        """
        function_name = algorithm if isinstance(algorithm, FunctionName) else FunctionName.from_name(algorithm)
        body = body or {}

        dataset: DataFrameInputDataset | SearchQueryInputDataset | TextDocsInputDataset | None = None
        if "input_data" in body:
            dataset = DataFrameInputDataset(data_frame=PandasDataFrame.model_validate(body["input_data"]))
        elif "input_index" in body:
            indices = body["input_index"]
            if isinstance(indices, str):
                indices = [indices]
            dataset = SearchQueryInputDataset(indices=indices, search_source=body.get("input_query") or {})
        elif "text_docs" in body:
            dataset = TextDocsInputDataset(docs=body["text_docs"], result_filter=body.get("result_filter"))
        elif "input_query" in body:
            raise InvalidArgumentError("input_index is required when input_query is given")

        return cls(
            algorithm=function_name,
            parameters=parse_params(function_name, body.get("parameters")),
            input_dataset=dataset,
        )


class MLOutputType(StrEnum):
    """Kinds of ML output."""

    PREDICTION = "PREDICTION"
    TRAINING = "TRAINING"
    MODEL_TENSOR = "MODEL_TENSOR"


class MLPredictionOutput(BaseModel):
    """Result of a predict call."""

    output_type: Literal[MLOutputType.PREDICTION] = MLOutputType.PREDICTION
    task_id: str | None = Field(default=None, description="Task that produced the prediction")
    status: str | None = Field(default=None, description="Task status")
    prediction_result: PandasDataFrame | None = Field(default=None, description="Predicted rows")


class MLTrainingOutput(BaseModel):
    """Result of a train call; carries a task id only for async training."""

    output_type: Literal[MLOutputType.TRAINING] = MLOutputType.TRAINING
    model_id: str | None = Field(default=None, description="Trained model id (sync training)")
    task_id: str | None = Field(default=None, description="Training task id (async training)")
    status: str | None = Field(default=None, description="Task status")


class ModelTensorOutput(BaseModel):
    """Raw tensors returned by model-serving algorithms."""

    output_type: Literal[MLOutputType.MODEL_TENSOR] = MLOutputType.MODEL_TENSOR
    inference_results: list[dict[str, Any]] = Field(default_factory=list, description="One entry per input")


MLOutput = Annotated[
    MLPredictionOutput | MLTrainingOutput | ModelTensorOutput,
    Field(discriminator="output_type"),
]
