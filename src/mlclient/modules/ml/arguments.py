"""Typed arguments of the multi-step run operation and their parsing from loose mappings."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mlclient.core.exceptions import InvalidArgumentError

from .parameters import FunctionName, MLAlgoParams, params_class_for

ACTION = "action"
ALGORITHM = "algorithm"
MODEL_ID = "model_id"
MODEL_ID_ALIAS = "modelId"
ASYNC = "async"

RESERVED_KEYS = frozenset({ACTION, ALGORITHM, MODEL_ID, MODEL_ID_ALIAS, ASYNC})


class RunAction(StrEnum):
    """Actions the run operation can branch to."""

    TRAIN = "train"
    PREDICT = "predict"
    TRAIN_AND_PREDICT = "trainandpredict"


class RunArguments(BaseModel):
    """Arguments of a run call.

    Build one directly or from a loose mapping with from_mapping():

        RunArguments.from_mapping({"action": "train", "algorithm": "kmeans", "centroids": 3, "async": True})
    """

    action: RunAction = Field(description="Which operation to run")
    algorithm: FunctionName | None = Field(default=None, description="Overrides the input's algorithm")
    parameters: MLAlgoParams | None = Field(default=None, description="Overrides the input's parameters")
    parameter_values: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw algorithm parameters, resolved against the target algorithm when no parameters are given",
    )
    model_id: str | None = Field(default=None, description="Model to predict with")
    async_task: bool = Field(default=False, description="Run training as an async task")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> RunArguments:
        """Parse arguments from a loosely typed mapping."""
        action = get_action(args)
        function_name = get_function_name(args)
        model_id = args.get(MODEL_ID, args.get(MODEL_ID_ALIAS))
        if model_id is not None and not isinstance(model_id, str):
            raise InvalidArgumentError("The model ID must be a string.")

        parameter_values = {key: value for key, value in args.items() if key not in RESERVED_KEYS}
        return cls(
            action=action,
            algorithm=function_name,
            parameters=convert_argument_to_ml_parameter(parameter_values, function_name),
            parameter_values=parameter_values,
            model_id=model_id or None,
            async_task=parse_async(args.get(ASYNC)),
        )


def get_action(args: Mapping[str, Any]) -> RunAction:
    """Read the action keyword; missing or unknown actions are invalid."""
    value = args.get(ACTION)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError("The parameter action is required.")
    if isinstance(value, RunAction):
        return value
    try:
        return RunAction(str(value).strip().lower())
    except ValueError:
        raise InvalidArgumentError("Unsupported action.") from None


def get_function_name(args: Mapping[str, Any]) -> FunctionName | None:
    """Read the optional algorithm name."""
    value = args.get(ALGORITHM)
    if value is None:
        return None
    if isinstance(value, FunctionName):
        return value
    return FunctionName.from_name(str(value))


def convert_argument_to_ml_parameter(
    args: Mapping[str, Any],
    function_name: FunctionName | None,
) -> MLAlgoParams | None:
    """Validate the non-reserved keys of the mapping against the algorithm's parameter schema.

    Returns None when no algorithm is known yet or no parameter keys are present.
    Keys the algorithm does not define are invalid arguments.
    """
    if function_name is None:
        return None
    values = {key: value for key, value in args.items() if key not in RESERVED_KEYS}
    if not values:
        return None

    params_cls = params_class_for(function_name)
    if params_cls is None:
        raise InvalidArgumentError(f"Algorithm {function_name} does not accept parameters")
    unknown = sorted(key for key in values if key not in params_cls.model_fields)
    if unknown:
        raise InvalidArgumentError(f"Unknown parameters for {function_name}: {', '.join(unknown)}")

    try:
        return params_cls.model_validate(values)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid parameters for {function_name}: {e}") from e


def parse_async(value: Any) -> bool:
    """Accept a boolean or the case-insensitive strings "true"/"false"; absent means False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidArgumentError(f"The parameter async must be a boolean, got {value!r}.")
