"""Conversion endpoints - script to class and class to script"""
from fastapi import APIRouter, HTTPException
import logging

from javax_bridge.api.models.requests import (
    ScriptToClassRequest,
    ScriptToClassResponse,
    ClassToScriptRequest,
    ClassToScriptResponse,
    VariableModel,
    ParameterModel,
)
from javax_bridge.services.transform import (
    Class2ScriptConverter,
    Script2ClassConverter,
    ConversionError,
    ParseError,
    ProcedureNotFoundError,
    build_script,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_STATUS = {
    ProcedureNotFoundError: 404,
    ParseError: 422,
}


@router.post("/script-to-class", response_model=ScriptToClassResponse)
def script_to_class(request: ScriptToClassRequest) -> ScriptToClassResponse:
    """
    Convert script text to a Java class.

    Never fails on malformed placeholders: lines that are not bindings stay
    in the run() body.

    **Example:**
    ```
    POST /api/javax/convert/script-to-class
    {
      "sourceText": "String username = **user_info;\\nSystem.out.println(username);",
      "className": "Demo"
    }
    ```
    """
    converter = Script2ClassConverter(
        class_name=request.className,
        package_name=request.packageName,
    )
    class_text, variables = converter.convert_with_variables(request.sourceText)

    return ScriptToClassResponse(
        classText=class_text,
        variables=[
            VariableModel(
                declaredType=var.declared_type,
                name=var.name,
                argumentKey=var.argument_key,
                lineNumber=var.line_number,
            )
            for var in variables
        ],
    )


@router.post("/class-to-script", response_model=ClassToScriptResponse)
def class_to_script(request: ClassToScriptRequest) -> ClassToScriptResponse:
    """
    Convert a Java class back to script text.

    Returns 404 when there is no public static run method and 422 when the
    class cannot be parsed.
    """
    try:
        record = Class2ScriptConverter().parse_run_method(request.sourceText)
    except ConversionError as e:
        logger.warning(f"class-to-script failed: {e.kind}: {e.message}")
        raise HTTPException(status_code=ERROR_STATUS.get(type(e), 400), detail=e.to_dict())

    return ClassToScriptResponse(
        scriptText=build_script(record),
        parameters=[
            ParameterModel(type=p.type, name=p.name, comment=p.comment)
            for p in record.parameters
        ],
    )
