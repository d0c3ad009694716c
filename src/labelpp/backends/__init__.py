"""Backends for labelpp output generation (source text, DOT)."""

from .text_renderer import render_instruction
from .dot_generator import DotMode, generate_dot, save_dot_file

__all__ = ["render_instruction", "DotMode", "generate_dot", "save_dot_file"]
