"""Javax Bridge - script/class converter for placeholder-driven Java procedures"""
__version__ = "0.1.0"
