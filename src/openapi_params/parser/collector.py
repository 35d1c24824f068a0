"""Accumulator for the per-operation parameter buckets."""

import logging
from collections.abc import Iterable

from openapi_params.parser.base import OperationParameter, OperationParameters

logger = logging.getLogger(__name__)

LOCATION_BUCKETS = {
    "path": "parameters_path",
    "query": "parameters_query",
    "form": "parameters_form",
    "cookie": "parameters_cookie",
    "header": "parameters_header",
}


class ParameterCollector:
    """Builds an OperationParameters in place and hands out a copy.

    With `unique_names` set, a parameter whose name was already admitted is
    dropped: it reaches no bucket and contributes no imports.
    """

    def __init__(self, unique_names: bool = False, reserved_names: Iterable[str] = ()):
        self.unique_names = unique_names
        self.names: set[str] = set(reserved_names)
        self.imports: list[str] = []
        self.parameters: list[OperationParameter] = []
        self.buckets: dict[str, list[OperationParameter]] = {field: [] for field in LOCATION_BUCKETS.values()}
        self.body: OperationParameter | None = None
        self.body_expanded: list[OperationParameter] = []

    def add(self, parameter: OperationParameter) -> bool:
        """Admit a path/query/form/cookie/header parameter; False if dropped."""
        if not self._admit(parameter):
            return False
        self.buckets[LOCATION_BUCKETS[parameter.location]].append(parameter)
        self._track(parameter)
        return True

    def set_body(self, parameter: OperationParameter) -> None:
        if self.body is not None:
            logger.debug("Body parameter %r replaces %r", parameter.prop, self.body.prop)
        self.body = parameter
        self._track(parameter)

    def add_body_field(self, parameter: OperationParameter) -> None:
        self.body_expanded.append(parameter)
        self._track(parameter)

    def extend(self, other: OperationParameters) -> None:
        """Append every bucket of an already aggregated parameter set."""
        self.imports.extend(other.imports)
        self.parameters.extend(other.parameters)
        for field, bucket in self.buckets.items():
            bucket.extend(getattr(other, field))
        if other.parameters_body is not None:
            self.body = other.parameters_body
        self.body_expanded.extend(other.parameters_body_expanded)
        self.names.update(p.name for p in other.parameters)

    def build(self) -> OperationParameters:
        return OperationParameters(
            imports=list(self.imports),
            parameters=list(self.parameters),
            parameters_body=self.body,
            parameters_body_expanded=list(self.body_expanded),
            **{field: list(bucket) for field, bucket in self.buckets.items()},
        )

    def _admit(self, parameter: OperationParameter) -> bool:
        if not self.unique_names:
            return True
        if parameter.name in self.names:
            logger.debug("Dropping duplicate %s parameter %r", parameter.location, parameter.name)
            return False
        self.names.add(parameter.name)
        return True

    def _track(self, parameter: OperationParameter) -> None:
        self.parameters.append(parameter)
        self.imports.extend(parameter.imports)
