"""
Asana response envelope and typed extraction.

Every Asana response body is a JSON object of the form

    {"data": <object|array|null>, "errors": [{"help", "message", "phrase"}, ...]}

with both keys optional. `Envelope` parses that shape once and lets callers
pull typed values out of `data`:

- `value(T)`   lossy single-value accessor, None on any mismatch
- `into(T)`    consuming form, raises AsanaApiErrors (API errors checked first)
- `values(T)`  zero/one/many normalization, single object tried first
- `errors()`   the reported API errors, or None
- `extract(T)` / `extract_many(T)` never raise; they return an Extraction that
  says why a value is missing
"""

from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    ValidationError,
)

from .errors import AsanaApiErrors, AsanaParseError
from .models import ApiError

T = TypeVar("T")

log = logging.getLogger("asana_api.envelope")


class EnvelopeKind(str, enum.Enum):
    DATA = "data"
    ERRORS = "errors"


class ExtractionFailure(str, enum.Enum):
    API_ERROR = "api_error"
    SHAPE_MISMATCH = "shape_mismatch"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class Extraction(Generic[T]):
    value: Optional[T] = None
    failure: Optional[ExtractionFailure] = None
    errors: List[ApiError] = field(default_factory=list)
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        if self.failure is None:
            return self.value  # type: ignore[return-value]
        raise AsanaApiErrors(self.errors, detail=self.detail)


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _adapter(target: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable targets, e.g. Annotated with dict metadata
        return TypeAdapter(target)


class Envelope(BaseModel):
    data: Any = None
    # Exposed through errors(); the wire key is "errors".
    error_list: List[ApiError] = Field(default_factory=list, alias="errors")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    _kind: EnvelopeKind = PrivateAttr(default=EnvelopeKind.DATA)

    def model_post_init(self, __context: Any) -> None:
        # Errors win when a body carries both.
        self._kind = EnvelopeKind.ERRORS if self.error_list else EnvelopeKind.DATA

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "Envelope":
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raw = text.decode("utf-8", "replace") if isinstance(text, bytes) else text
            snippet = (raw or "")[:500]
            log.debug("asana.parse_failed", extra={"error_count": exc.error_count()})
            raise AsanaParseError(
                f"Expected an Asana JSON envelope, got body snippet: {snippet!r} "
                f"({exc.error_count()} validation error(s))"
            ) from exc

    @property
    def kind(self) -> EnvelopeKind:
        return self._kind

    @property
    def is_error(self) -> bool:
        return self._kind is EnvelopeKind.ERRORS

    def _validate(self, target: Any) -> Any:
        # Strict: a "5" is not an int. Validate a copy so results never
        # alias the envelope's own data.
        return _adapter(target).validate_python(
            copy.deepcopy(self.data), strict=True
        )

    def value(self, target: Type[T]) -> Optional[T]:
        try:
            return self._validate(target)
        except ValidationError:
            return None

    def into(self, target: Type[T]) -> T:
        if self.error_list:
            raise AsanaApiErrors(self.error_list)
        try:
            return self._validate(target)
        except ValidationError as exc:
            raise AsanaApiErrors([], detail=str(exc)) from exc

    def values(self, target: Type[T]) -> Optional[List[T]]:
        try:
            return [self._validate(target)]
        except ValidationError:
            pass
        try:
            return self._validate(List[target])  # type: ignore[valid-type]
        except ValidationError:
            return None

    def errors(self) -> Optional[List[ApiError]]:
        return list(self.error_list) if self.error_list else None

    def extract(self, target: Type[T]) -> Extraction[T]:
        if self.error_list:
            return Extraction(
                failure=ExtractionFailure.API_ERROR, errors=list(self.error_list)
            )
        try:
            return Extraction(value=self._validate(target))
        except ValidationError as exc:
            return self._mismatch(exc)

    def extract_many(self, target: Type[T]) -> Extraction[List[T]]:
        if self.error_list:
            return Extraction(
                failure=ExtractionFailure.API_ERROR, errors=list(self.error_list)
            )
        try:
            return Extraction(value=[self._validate(target)])
        except ValidationError:
            pass
        try:
            return Extraction(value=self._validate(List[target]))  # type: ignore[valid-type]
        except ValidationError as exc:
            return self._mismatch(exc)

    def _mismatch(self, exc: ValidationError) -> Extraction[Any]:
        failure = (
            ExtractionFailure.NO_DATA
            if self.data is None
            else ExtractionFailure.SHAPE_MISMATCH
        )
        return Extraction(failure=failure, detail=str(exc))


def parse_envelope(text: Union[str, bytes]) -> Envelope:
    return Envelope.parse(text)


__all__ = [
    "Envelope",
    "EnvelopeKind",
    "Extraction",
    "ExtractionFailure",
    "parse_envelope",
]
