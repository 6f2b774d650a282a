"""Errores del Core.

Por qué una jerarquía propia:
- La CLI distingue errores de uso (argumentos inválidos, exit 2) de fallos en
  tiempo de ejecución (red, decodificación, JSON; exit 1).
- Los adaptadores no filtran excepciones de httpx hacia la CLI.
"""

from __future__ import annotations


class HttpieError(Exception):
    """Base de todos los errores de httpie-lite."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageError(HttpieError, ValueError):
    """Argumento de línea de comandos inválido."""


class InvalidUrlError(UsageError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class KVPairParseError(UsageError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse {token!r}: expected KEY=VALUE")


class RequestFailedError(HttpieError):
    """Fallo de transporte (DNS, conexión, timeout, TLS...)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class BodyDecodeError(HttpieError):
    """Cabecera o cuerpo de respuesta que no se puede decodificar como texto."""


class JsonFormatError(HttpieError):
    """Cuerpo anunciado como JSON que no es JSON válido."""
