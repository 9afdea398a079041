"""Services package"""
from javax_bridge.services.workspace import convert_script_file, convert_class_file, package_name_for

__all__ = [
    "convert_script_file",
    "convert_class_file",
    "package_name_for",
]
