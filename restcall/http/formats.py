"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Body format adapters.

A format adapter knows how to pretty-print a wire body for logging, parse a
wire body into a typed value and serialize a value into a wire body. Parsing
and validation go through pydantic, so any type pydantic can validate
(models, dataclasses, dicts, lists, scalars) can be requested.

Available adapters:
- ``JSON``: ``application/json``
- ``XML``: ``application/xml``
"""

from __future__ import annotations

import datetime
import decimal
import enum
import json
import types
import typing
import uuid
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from restcall.exceptions import MalformedBodyError

T = TypeVar("T")

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)
_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))
_SCALAR_TYPES = (
    str, bytes, int, float, decimal.Decimal, enum.Enum,
    datetime.date, datetime.time, datetime.timedelta, uuid.UUID,
)

# key holding the text of a leaf element that also carries attributes
TEXT_KEY = "#text"


@lru_cache(maxsize=256)
def _type_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


class FormatAdapter(ABC):
    """Abstract base for all body format adapters."""

    content_type: str = ""
    indent: int = 2

    @abstractmethod
    def pretty(self, text: str) -> str:
        """Format a wire body for display. Never raises on malformed input."""
        ...

    @abstractmethod
    def parse(self, text: str, type_: Type[T]) -> T:
        """Parse a wire body into ``type_``.

        Raises:
            MalformedBodyError: If the body is not valid for this format or
                does not validate against ``type_``.
        """
        ...

    @abstractmethod
    def serialize(self, value: Any, indent: Optional[int] = None) -> str:
        """Serialize a value into a wire body."""
        ...


class JsonFormat(FormatAdapter):
    """JSON bodies, validated with pydantic.

    Args:
        indent: Indentation used by ``pretty``.
    """

    content_type = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def pretty(self, text: str) -> str:
        try:
            return json.dumps(json.loads(text), indent=self.indent, ensure_ascii=False)
        except (ValueError, RecursionError):
            return text

    def parse(self, text: str, type_: Type[T]) -> T:
        try:
            return _type_adapter(type_).validate_json(text)
        except (ValidationError, RecursionError) as e:
            raise MalformedBodyError(
                f"Response body is not a valid {_type_name(type_)} JSON document: {e}",
                content_type=self.content_type,
                body=text,
            ) from e

    def serialize(self, value: Any, indent: Optional[int] = None) -> str:
        data = to_jsonable_python(value)
        if indent is None:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return json.dumps(data, indent=indent, ensure_ascii=False)


class XmlFormat(FormatAdapter):
    """XML bodies bound to the shape of the requested type.

    The root element stands for the requested type itself; its attributes
    and child elements become fields. Elements repeated under the same tag
    become lists, and a list field also accepts a wrapper element holding
    the items (``<Items><Item/><Item/></Items>``). A scalar field bound to
    an element with attributes takes the element's text; other targets
    see it under ``TEXT_KEY``.
    """

    content_type = "application/xml"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def pretty(self, text: str) -> str:
        try:
            root = ET.fromstring(text)
            ET.indent(root, space=" " * self.indent)
            return ET.tostring(root, encoding="unicode")
        except (ET.ParseError, ValueError, RecursionError):
            return text

    def parse(self, text: str, type_: Type[T]) -> T:
        try:
            root = ET.fromstring(text)
            data = _bind(_element_to_data(root), type_)
        except (ET.ParseError, ValueError, RecursionError) as e:
            raise MalformedBodyError(
                f"Response body is not well-formed XML: {e}",
                content_type=self.content_type,
                body=text,
            ) from e

        try:
            return _type_adapter(type_).validate_python(data)
        except (ValidationError, RecursionError) as e:
            raise MalformedBodyError(
                f"Response body does not match {_type_name(type_)}: {e}",
                content_type=self.content_type,
                body=text,
            ) from e

    def serialize(self, value: Any, indent: Optional[int] = None) -> str:
        root = ET.Element(type(value).__name__)
        _fill_element(root, to_jsonable_python(value))
        if indent is not None:
            ET.indent(root, space=" " * indent)
        return ET.tostring(root, encoding="unicode")


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", repr(type_))


def _local_name(tag: str) -> str:
    # drop "{namespace}" prefixes
    return tag.rsplit("}", 1)[-1]


def _element_to_data(element: ET.Element) -> Any:
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    data: dict[str, Any] = {_local_name(k): v for k, v in element.attrib.items()}
    if text and not children:
        data[TEXT_KEY] = text
    repeated: set[str] = set()
    for child in children:
        tag = _local_name(child.tag)
        value = _element_to_data(child)
        if tag not in data:
            data[tag] = value
        elif tag in repeated:
            data[tag].append(value)
        else:
            data[tag] = [data[tag], value]
            repeated.add(tag)
    return data


def _unwrap_optional(type_: Any) -> Any:
    if typing.get_origin(type_) in _UNION_ORIGINS:
        args = [arg for arg in typing.get_args(type_) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return type_


def _model_field(model: Type[BaseModel], key: str) -> Optional[Any]:
    for name, info in model.model_fields.items():
        if key == name or key == info.alias or key == info.validation_alias:
            return info
    return None


def _is_model(type_: Any) -> bool:
    return isinstance(type_, type) and issubclass(type_, BaseModel)


def _bind(data: Any, type_: Any) -> Any:
    """Reshape element data to match list fields declared on ``type_``."""
    type_ = _unwrap_optional(type_)
    origin = typing.get_origin(type_)

    if origin in _SEQUENCE_ORIGINS:
        args = typing.get_args(type_)
        item_type = args[0] if args else Any
        if data == "":
            return []
        if isinstance(data, dict) and len(data) == 1:
            (key, inner), = data.items()
            if not (_is_model(item_type) and _model_field(item_type, key) is not None):
                data = inner
        items = data if isinstance(data, list) else [data]
        return [_bind(item, item_type) for item in items]

    if _is_model(type_) and isinstance(data, dict):
        bound = {}
        for key, value in data.items():
            info = _model_field(type_, key)
            bound[key] = _bind(value, info.annotation) if info is not None else value
        return bound

    if isinstance(data, dict) and TEXT_KEY in data and _is_scalar(type_):
        # scalar target: keep the text, drop the attributes
        return data[TEXT_KEY]

    return data


def _is_scalar(type_: Any) -> bool:
    return isinstance(type_, type) and issubclass(type_, _SCALAR_TYPES)


def _fill_element(element: ET.Element, data: Any) -> None:
    if isinstance(data, dict):
        for key, value in data.items():
            values = value if isinstance(value, list) else [value]
            for item in values:
                _fill_element(ET.SubElement(element, str(key)), item)
    elif isinstance(data, list):
        for item in data:
            _fill_element(ET.SubElement(element, "item"), item)
    elif isinstance(data, bool):
        element.text = "true" if data else "false"
    elif data is not None:
        element.text = str(data)


JSON = JsonFormat()
XML = XmlFormat()
