"""
File glue around the converter.

Mirrors what the editor actions do: write the generated class next to its
package, create inputs/<key>.json stubs, and drop reverse-converted scripts
into a javax/ sub-directory.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from javax_bridge.config import settings
from javax_bridge.services.transform import Class2ScriptConverter, Script2ClassConverter
from javax_bridge.services.transform.builder import INPUTS_DIR

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def package_name_for(file_path: PathLike, source_root: PathLike) -> str:
    """
    Derive a Java package name from a file's location under a source root.

    Args:
        file_path: Path of the script file
        source_root: Root of the Java source tree

    Returns:
        Dotted package name, empty when the file sits in the root itself

    Raises:
        ValueError: If the file is not under the source root
    """
    parent = Path(file_path).resolve().parent
    root = Path(source_root).resolve()
    try:
        relative = parent.relative_to(root)
    except ValueError:
        raise ValueError(f"{file_path} is not under source root {source_root}") from None
    return ".".join(relative.parts)


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def convert_script_file(
    script_path: PathLike,
    source_root: PathLike,
    class_name: Optional[str] = None
) -> Path:
    """
    Convert a script file and write the class into its package directory.

    Existing argument stubs are left untouched; an existing class file is
    replaced.

    Args:
        script_path: Script file to convert
        source_root: Root of the Java source tree
        class_name: Class name (defaults to the script file name)

    Returns:
        Path of the written class file
    """
    script_path = Path(script_path)
    code = _read_text(script_path)
    package_name = package_name_for(script_path, source_root)
    converter = Script2ClassConverter(class_name=class_name or script_path.stem, package_name=package_name)
    java_code, variables = converter.convert_with_variables(code)

    target_dir = Path(source_root).joinpath(*package_name.split(".")) if package_name else Path(source_root)
    inputs_dir = target_dir / INPUTS_DIR
    inputs_dir.mkdir(parents=True, exist_ok=True)

    for var in variables:
        stub = inputs_dir / f"{var.argument_key}.json"
        if not stub.exists():
            stub.touch()
            logger.info(f"Created argument stub {stub}")

    class_file = target_dir / f"{converter.class_name}.{settings.CLASS_EXTENSION}"
    if class_file.exists():
        logger.info(f"Replacing existing {class_file}")
    class_file.write_text(java_code, encoding="utf-8")
    logger.info(f"Wrote {class_file} ({len(variables)} argument(s))")
    return class_file


def convert_class_file(class_path: PathLike) -> Path:
    """
    Convert a class file back to a script in the sibling javax/ directory.

    Args:
        class_path: Java file containing a public static run method

    Returns:
        Path of the written script file

    Raises:
        ParseError: If the class cannot be parsed
        ProcedureNotFoundError: If there is no qualifying run method
    """
    class_path = Path(class_path)
    script = Class2ScriptConverter().convert(_read_text(class_path))

    script_dir = class_path.parent / settings.SCRIPT_DIR_NAME
    script_dir.mkdir(parents=True, exist_ok=True)
    script_file = script_dir / f"{class_path.stem}.{settings.SCRIPT_EXTENSION}"
    script_file.write_text(script, encoding="utf-8")
    logger.info(f"Wrote {script_file}")
    return script_file
