"""Request and response models for API endpoints"""
from pydantic import BaseModel
from typing import Optional, List


class ScriptToClassRequest(BaseModel):
    """Request to convert script text to a Java class"""
    sourceText: str
    packageName: str = ""
    className: Optional[str] = None   # Falls back to DEFAULT_CLASS_NAME


class VariableModel(BaseModel):
    """A placeholder binding found in the script"""
    declaredType: str
    name: str
    argumentKey: str
    lineNumber: int


class ScriptToClassResponse(BaseModel):
    """Generated class and the arguments it reads"""
    classText: str
    variables: List[VariableModel] = []


class ClassToScriptRequest(BaseModel):
    """Request to convert a Java class back to script text"""
    sourceText: str


class ParameterModel(BaseModel):
    """A run() parameter"""
    type: str
    name: str
    comment: str = ""


class ClassToScriptResponse(BaseModel):
    """Generated script and the run() parameters it was built from"""
    scriptText: str
    parameters: List[ParameterModel] = []


class ConversionErrorDetail(BaseModel):
    """Labeled conversion failure"""
    kind: str
    message: str
