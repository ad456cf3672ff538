"""
Shared Pydantic building blocks for response schemas.

Wire convention: PascalCase field names, money as exact JSON numbers.
Pydantic's JSON mode renders Decimal as a string, so money responses are
dumped in Python mode and rendered by `DecimalJSONResponse`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import simplejson
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

Money = Decimal


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class DecimalJSONResponse(JSONResponse):
    """
    JSON response that writes Decimal values unquoted with all their digits.
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


def wire_response(payload: WireModel | list[WireModel]) -> DecimalJSONResponse:
    if isinstance(payload, list):
        return DecimalJSONResponse([item.model_dump(by_alias=True) for item in payload])
    return DecimalJSONResponse(payload.model_dump(by_alias=True))
