"""
This submodule contains the writer that renders plans as indented text
"""

from .attribute import Attribute, AttributeKind, format_value
from .attribute_buffer import AttributeBuffer
from .consistency import SUBSET_MARKER, StructuralMismatch, StructuralMismatchError, check_inputs_present
from .explain_plan import explain_plan
from .plan_writer import PlanWriter
from .sinks import LoggerSink, OutputSink, StringSink, TextStreamSink
from .spacer import Spacer

__all__ = [
    "Attribute",
    "AttributeKind",
    "AttributeBuffer",
    "format_value",
    "SUBSET_MARKER",
    "StructuralMismatch",
    "StructuralMismatchError",
    "check_inputs_present",
    "explain_plan",
    "PlanWriter",
    "LoggerSink",
    "OutputSink",
    "StringSink",
    "TextStreamSink",
    "Spacer",
]
