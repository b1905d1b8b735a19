from __future__ import annotations

from enum import Enum


class Area(str, Enum):
    """Áreas de la Dirección que originan un expediente."""

    CONSUMIDOR = "DEFENSA DEL CONSUMIDOR"
    JURIDICO = "DEPARTAMENTO JURIDICO"
    LEALTAD = "LEALTAD COMERCIAL"
    OTROS = "OTROS"


class NotifType(str, Enum):
    """Tipos de notificación que se diligencian."""

    AUDIENCIA = "AUDIENCIA"
    IMPUTACION = "AUTO DE IMPUTACIÓN"
    PREVENTIVA = "PREVENTIVA"
    TRASLADO = "TRASLADO"


class InfractionStatus(str, Enum):
    PENDIENTE = "Pendiente"
    RESUELTA = "Resuelta"
    ARCHIVADA = "Archivada"
