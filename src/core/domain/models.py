"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- La CLI y los tests construyen peticiones/respuestas sin tocar httpx.

Nota:
- Estos modelos describen *qué* se envía y se imprime, no *cómo* viaja por la red.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.errors import KVPairParseError


class HttpMethod(str, Enum):
    """Métodos soportados por la CLI."""

    GET = "GET"
    POST = "POST"


class KVPair(BaseModel):
    """Un token `key=value` de la línea de comandos.

    Por qué existe:
    - Es la única entrada estructurada del usuario; se usa para el cuerpo JSON del POST.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Parte anterior al primer '='.")
    value: str = Field(..., min_length=1, description="Resto del token tras el primer '='.")

    @classmethod
    def parse(cls, token: str) -> "KVPair":
        """Divide `token` por el primer `=`; ambas partes deben ser no vacías."""

        key, sep, value = token.partition("=")
        if not sep or not key or not value:
            raise KVPairParseError(token)
        return cls(key=key, value=value)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class HttpRequest(BaseModel):
    """Una petición saliente ya validada."""

    method: HttpMethod = Field(..., description="GET o POST.")
    url: str = Field(..., min_length=1, description="URL absoluta validada.")
    body: list[KVPair] = Field(
        default_factory=list,
        description="Pares key=value que forman el cuerpo JSON (solo POST).",
    )

    def json_body(self) -> dict[str, str] | None:
        if self.method is HttpMethod.GET:
            return None
        # Clave repetida: gana el último valor.
        return {pair.key: pair.value for pair in self.body}


class ResponseView(BaseModel):
    """Parte imprimible de una respuesta HTTP.

    Por qué un modelo separado de `httpx.Response`:
    - La capa de UI solo necesita texto ya decodificado.
    - Permite testear el render sin levantar un transporte.
    """

    http_version: str = Field(default="HTTP/1.1", description="Versión del protocolo.")
    status_code: int = Field(..., ge=100, le=999)
    reason_phrase: str = Field(default="")
    headers: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Cabeceras en orden de llegada (se permiten repetidas).",
    )
    content_type: str | None = Field(
        default=None,
        description="Media type normalizado (`type/subtype`, sin parámetros).",
    )
    text: str = Field(default="", description="Cuerpo decodificado.")

    def status_line(self) -> str:
        line = f"{self.http_version} {self.status_code}"
        if self.reason_phrase:
            line = f"{line} {self.reason_phrase}"
        return line

    def is_json(self) -> bool:
        if not self.content_type:
            return False
        return self.content_type == "application/json" or (
            self.content_type.startswith("application/") and self.content_type.endswith("+json")
        )

    def summary(self) -> dict[str, Any]:
        return {
            "status": self.status_code,
            "content_type": self.content_type,
            "bytes": len(self.text.encode("utf-8")),
        }
