"""API models package"""
from javax_bridge.api.models.requests import (
    ScriptToClassRequest,
    ScriptToClassResponse,
    ClassToScriptRequest,
    ClassToScriptResponse,
    VariableModel,
    ParameterModel,
    ConversionErrorDetail,
)

__all__ = [
    "ScriptToClassRequest",
    "ScriptToClassResponse",
    "ClassToScriptRequest",
    "ClassToScriptResponse",
    "VariableModel",
    "ParameterModel",
    "ConversionErrorDetail",
]
